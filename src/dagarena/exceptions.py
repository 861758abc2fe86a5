from __future__ import annotations

from typing import Sequence

from .structs import NodeId


class DagException(Exception):
    """A base class for all exceptions raised by this library.

    Anything else bubbling out of a `Dag` method should be treated as a bug.
    """


class InvalidNodeReference(DagException, LookupError):
    """A node id that does not exist in the graph's arena was passed in.

    This is a programming error at the call site. The graph is not modified
    by the call that raised it.
    """

    def __init__(self, node_id: object) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"unknown node id {self.node_id!r}"


class CycleDetected(DagException):
    """The graph contains a cycle, so the requested operation cannot run.

    `path` lists the nodes of the cycle, starting and ending on the same id.
    """

    def __init__(self, path: Sequence[NodeId]) -> None:
        super().__init__(path)
        self.path = list(path)

    def __str__(self) -> str:
        return "graph contains a cycle: {}".format(
            " -> ".join(str(n) for n in self.path)
        )
