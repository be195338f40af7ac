"""
Data models for bow-tie diagram generation.

This module contains the entities produced by the parser and consumed by the
layout engine, together with the small geometric value types the layout
engine hands to a renderer.

Classes:
    ComponentKind: Which lane (cause or consequence side) a component lives in.
    Component: A cause or consequence box and the barriers guarding it.
    Diagram: Parsed diagram: title, top event and ordered components.
    Vector2: A 2-D point in canvas coordinates.
    Rectangle: An axis-aligned rectangle described by its centre.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ComponentKind(Enum):
    """Lane a component belongs to."""

    CAUSE = "cause"
    CONSEQUENCE = "consequence"


class Component:
    """
    A cause or consequence of the top event.

    The kind is fixed when the component is created. Only the barrier list
    changes afterwards, and only while parsing.

    Attributes:
        name: Display label of the component.
        kind: Lane of the component (read-only).
        barriers: Barrier names attached to this component, in declaration
            order. Repeated declarations accumulate.
    """

    __slots__ = ("name", "_kind", "barriers")

    def __init__(
        self, name: str, kind: ComponentKind, barriers: Optional[List[str]] = None
    ):
        self.name = name
        self._kind = kind
        self.barriers: List[str] = list(barriers) if barriers else []

    @property
    def kind(self) -> ComponentKind:
        return self._kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Component):
            return NotImplemented
        return (
            self.name == other.name
            and self.kind == other.kind
            and self.barriers == other.barriers
        )

    def __repr__(self) -> str:
        return (
            f"Component(name={self.name!r}, kind={self.kind.name}, "
            f"barriers={self.barriers!r})"
        )


@dataclass
class Diagram:
    """
    A parsed bow-tie diagram.

    Component order is significant: it decides the top-to-bottom stacking
    of boxes in each lane and the first-seen order of barriers.
    """

    title: str = ""
    event: str = ""
    components: List[Component] = field(default_factory=list)

    def components_of(self, kind: ComponentKind) -> List[Component]:
        """Return the components of one lane, in diagram order."""
        return [c for c in self.components if c.kind == kind]

    def causes(self) -> List[Component]:
        return self.components_of(ComponentKind.CAUSE)

    def consequences(self) -> List[Component]:
        return self.components_of(ComponentKind.CONSEQUENCE)

    def find(self, name: str, kind: ComponentKind) -> Optional[Component]:
        """Find a component by exact name within a lane."""
        for component in self.components:
            if component.kind == kind and component.name == name:
                return component
        return None


@dataclass(frozen=True)
class Vector2:
    """A point in canvas coordinates (y grows downwards)."""

    x: float
    y: float


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle described by its centre.

    Attributes:
        centre: Centre point of the rectangle.
        width: Total width.
        height: Total height.
    """

    centre: Vector2
    width: float
    height: float

    def with_padding(self, padding: float) -> "Rectangle":
        """Return a copy grown by ``padding`` in both dimensions."""
        return Rectangle(self.centre, self.width + padding, self.height + padding)

    @property
    def left(self) -> float:
        return self.centre.x - self.width / 2.0

    @property
    def right(self) -> float:
        return self.centre.x + self.width / 2.0

    @property
    def top(self) -> float:
        return self.centre.y - self.height / 2.0

    @property
    def bottom(self) -> float:
        return self.centre.y + self.height / 2.0

    @property
    def top_left(self) -> Vector2:
        return Vector2(self.left, self.top)
