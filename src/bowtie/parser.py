"""
Parser module for bow-tie generation.

Turns the line-oriented description language into a Diagram:

    title Chemical spillage
    event Spill
    cause Valve failure
    consequence Fire
    barrier Inspection: Valve failure

Malformed lines are skipped without raising.
"""

import logging
from typing import List, Optional, Tuple

from .models import Component, ComponentKind, Diagram

logger = logging.getLogger(__name__)


class Parser:
    """Parses description-language text into a Diagram."""

    COMPONENT_COMMANDS = {
        "cause": ComponentKind.CAUSE,
        "consequence": ComponentKind.CONSEQUENCE,
    }

    def parse(self, input_text: str) -> Diagram:
        """
        Parse input text and return the populated Diagram.

        Each non-empty line is ``command value``, split on the first space.
        Unknown commands, lines without a space, comment lines and barrier
        lines without a colon are skipped.

        Args:
            input_text: Multi-line description-language text.

        Returns:
            The parsed Diagram.
        """
        diagram = Diagram()

        for line_num, line in enumerate(input_text.split("\n"), 1):
            if line.endswith("\r"):
                line = line[:-1]

            # Skip empty lines and comments
            if not line.strip() or line.lstrip().startswith("#"):
                continue

            # Indentation is ignored, trailing spaces still separate
            parts = self._split_command(line.lstrip())
            if parts is None:
                logger.debug("Line %d: no command separator, skipped", line_num)
                continue

            command, value = parts
            value = value.strip()

            if command == "title":
                diagram.title = value
            elif command == "event":
                diagram.event = value
            elif command in self.COMPONENT_COMMANDS:
                self._add_component(diagram, value, self.COMPONENT_COMMANDS[command])
            elif command == "barrier":
                if not self._add_barrier(diagram, value):
                    logger.debug("Line %d: barrier without ':', skipped", line_num)
            else:
                logger.debug("Line %d: unknown command %r, skipped", line_num, command)

        logger.debug(
            "Parsed diagram %r: %d causes, %d consequences",
            diagram.title,
            len(diagram.causes()),
            len(diagram.consequences()),
        )
        return diagram

    def _split_command(self, line: str) -> Optional[Tuple[str, str]]:
        command, sep, value = line.partition(" ")
        if not sep:
            return None
        return command, value

    def _add_component(self, diagram: Diagram, name: str, kind: ComponentKind) -> None:
        # Redeclaring a component in the same lane is a no-op
        if diagram.find(name, kind) is not None:
            return
        diagram.components.append(Component(name, kind))

    def _add_barrier(self, diagram: Diagram, value: str) -> bool:
        """
        Attach a barrier to every component named in its target list.

        Targets match components of either kind. Unknown targets are ignored.

        Returns:
            False if the value has no ``name: targets`` separator.
        """
        barrier_name, sep, target_text = value.partition(":")
        if not sep:
            return False

        barrier_name = barrier_name.strip()
        targets = self._split_targets(target_text)

        for component in diagram.components:
            if component.name.strip() in targets:
                component.barriers.append(barrier_name)
        return True

    def _split_targets(self, target_text: str) -> List[str]:
        return [name.strip() for name in target_text.strip().split(",")]


def parse_diagram(input_text: str) -> Diagram:
    """
    Convenience function to parse description-language text.

    Args:
        input_text: Multi-line description-language text.

    Returns:
        The parsed Diagram.
    """
    parser = Parser()
    return parser.parse(input_text)
