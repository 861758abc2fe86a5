from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

if TYPE_CHECKING:
    from .structs import NodeId


class BaseReporter:
    """Delegate class to provide progress reporting for a graph."""

    def adding_node(self, node_id: NodeId, value: Any) -> None:
        """Called after a node is appended to the arena."""

    def adding_edge(self, parent: NodeId, child: NodeId) -> None:
        """Called after a new edge is inserted.

        This is NOT called when an existing edge is added again.
        """

    def cycle_found(self, path: Sequence[NodeId]) -> None:
        """Called when a cycle search finds a cycle.

        The path starts and ends on the same node.
        """

    def starting_reduction(self) -> None:
        """Called before a transitive reduction pass starts."""

    def removing_edge(self, parent: NodeId, child: NodeId) -> None:
        """Called before a redundant edge is removed by reduction."""

    def ending_reduction(self, removed: int) -> None:
        """Called after a transitive reduction pass completes.

        `removed` is the number of edges the pass dropped.
        """
