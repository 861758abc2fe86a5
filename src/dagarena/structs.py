from __future__ import annotations

from typing import Generic, NewType, TypeVar

T = TypeVar("T")  # Payload.

NodeId = NewType("NodeId", int)


class Node(Generic[T]):
    """A single entry in a DAG's arena.

    This holds two attributes:

    * `value` is the payload supplied by the caller. It plays no part in the
      node's identity; two nodes holding equal values are distinct.
    * `children` is the set of ids this node has a direct edge to.

    .. note::
        Nodes are owned by their `Dag`. Mutate edges through the graph, never
        through this object, or the graph's root tracking goes stale.
    """

    def __init__(self, value: T) -> None:
        self.value = value
        self.children: set[NodeId] = set()

    def __repr__(self) -> str:
        children = ", ".join(str(c) for c in sorted(self.children))
        return f"Node({self.value!r}, children=[{children}])"

    def copy(self) -> Node[T]:
        other = type(self)(self.value)
        other.children = set(self.children)
        return other
