"""
Barrier graph for one lane of a bow-tie diagram.

Uses networkx for:
- Component/barrier association (a bipartite graph)
- Barrier frequency (degree of a barrier node)
- Looking up which components a barrier intercepts

Barrier nodes are keyed by ``(lane, name)`` so a barrier declared on both
sides of the diagram is two separate nodes in two separate graphs.
"""

from typing import List, Sequence, Tuple

import networkx as nx

from .models import Component, ComponentKind

COMPONENT = "component"
BARRIER = "barrier"


class BarrierGraph:
    """
    Bipartite graph of a lane's components and the barriers guarding them.

    Node insertion order follows the diagram: components in lane order, and
    barriers the first time any component references them. That order is
    the tie-break when barriers are equally frequent.
    """

    def __init__(self, kind: ComponentKind):
        self.kind = kind
        self.graph: nx.Graph = nx.Graph()

    @classmethod
    def for_lane(
        cls, components: Sequence[Component], kind: ComponentKind
    ) -> "BarrierGraph":
        """
        Build the graph for the components of one lane.

        Args:
            components: The lane's components, in diagram order.
            kind: The lane. Components of the other kind are ignored.

        Returns:
            A populated BarrierGraph.
        """
        lane = cls(kind)
        for index, component in enumerate(c for c in components if c.kind == kind):
            component_node = lane._component_node(index)
            lane.graph.add_node(component_node, type=COMPONENT, name=component.name)
            for barrier in component.barriers:
                barrier_node = lane._barrier_node(barrier)
                if barrier_node not in lane.graph:
                    lane.graph.add_node(barrier_node, type=BARRIER, name=barrier)
                # Repeated references collapse into one edge
                lane.graph.add_edge(component_node, barrier_node)
        return lane

    def _component_node(self, index: int) -> Tuple[str, ComponentKind, int]:
        return (COMPONENT, self.kind, index)

    def _barrier_node(self, name: str) -> Tuple[str, ComponentKind, str]:
        return (BARRIER, self.kind, name)

    def barriers(self) -> List[str]:
        """Distinct barrier names of the lane, in first-seen order."""
        return [
            data["name"]
            for _, data in self.graph.nodes(data=True)
            if data["type"] == BARRIER
        ]

    def frequencies(self) -> List[Tuple[str, int]]:
        """
        Barrier names with the number of components each one guards.

        Sorted by descending frequency. The sort is stable, so equally
        frequent barriers keep first-seen order.
        """
        counts = [
            (name, self.graph.degree(self._barrier_node(name)))
            for name in self.barriers()
        ]
        return sorted(counts, key=lambda item: -item[1])

    def components_with(self, barrier: str) -> List[int]:
        """Lane indexes of the components guarded by ``barrier``, in order."""
        node = self._barrier_node(barrier)
        if node not in self.graph:
            return []
        return sorted(neighbor[2] for neighbor in self.graph.neighbors(node))

    def __len__(self) -> int:
        return len(self.barriers())
