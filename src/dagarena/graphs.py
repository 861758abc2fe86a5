from __future__ import annotations

from typing import Generic, Iterable, Iterator

from .exceptions import CycleDetected, InvalidNodeReference
from .reporters import BaseReporter
from .structs import Node, NodeId, T


def _find_cycle_from(
    nodes: list[Node[T]],
    start: NodeId,
    done: set[NodeId],
) -> list[NodeId] | None:
    """Walk depth-first from `start` looking for an edge back into the chain.

    `path` is the current chain of ancestors. Reaching a node already on it
    means a cycle. A node is added to `done` once everything below it has
    been walked without finding one; it cannot lead back into any chain, so
    later walks skip it.
    """
    path = [start]
    on_path = {start}
    stack = [iter(sorted(nodes[start].children))]
    while stack:
        for child in stack[-1]:
            if child in on_path:
                return path[path.index(child) :] + [child]
            if child in done:
                continue
            path.append(child)
            on_path.add(child)
            stack.append(iter(sorted(nodes[child].children)))
            break
        else:
            stack.pop()
            finished = path.pop()
            on_path.remove(finished)
            done.add(finished)
    return None


class Dag(Generic[T]):
    """A directed acyclic graph that owns its nodes in an append-only arena.

    Nodes are addressed by the `NodeId` returned from `add_node()`. Ids are
    positions in the arena; they are never reused, and nodes are never
    removed. The graph tracks its roots (nodes with no incoming edge) as
    edges are added.

    Acyclicity is not enforced on insertion. Use `cycle_check()` to validate
    the graph; `count_edges()` and `transitive_reduce()` refuse to run on a
    cyclic graph and raise `CycleDetected` instead.
    """

    def __init__(self, reporter: BaseReporter | None = None) -> None:
        self._nodes: list[Node[T]] = []
        self._roots: set[NodeId] = set()
        self._r = BaseReporter() if reporter is None else reporter

    def __repr__(self) -> str:
        return "{}(nodes={}, roots={})".format(
            type(self).__name__, len(self._nodes), sorted(self._roots)
        )

    def __iter__(self) -> Iterator[NodeId]:
        return (NodeId(i) for i in range(len(self._nodes)))

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int) or isinstance(key, bool):
            return False
        return 0 <= key < len(self._nodes)

    def __getitem__(self, key: NodeId) -> T:
        return self.node(key).value

    @property
    def roots(self) -> frozenset[NodeId]:
        """Return the ids of nodes that have no incoming edge."""
        return frozenset(self._roots)

    def node(self, key: NodeId) -> Node[T]:
        """Return the arena entry for `key`."""
        if key not in self:
            raise InvalidNodeReference(key)
        return self._nodes[key]

    def copy(self) -> Dag[T]:
        """Return a copy of this graph.

        Node ids and payloads carry over; edge sets are independent. The
        reporter is shared.
        """
        other = type(self)(self._r)
        other._nodes = [node.copy() for node in self._nodes]
        other._roots = set(self._roots)
        return other

    def add_node(self, value: T) -> NodeId:
        """Append a new node with no children and return its id.

        A new node has no parent, so it starts out as a root.
        """
        node_id = NodeId(len(self._nodes))
        self._nodes.append(Node(value))
        self._roots.add(node_id)
        self._r.adding_node(node_id, value)
        return node_id

    def add_edge(self, parent: NodeId, child: NodeId) -> None:
        """Connect two existing nodes.

        Nothing happens if the nodes are already connected. `child` stops
        being a root. This does not check whether the new edge closes a
        cycle.
        """
        for key in (parent, child):
            if key not in self:
                raise InvalidNodeReference(key)
        children = self._nodes[parent].children
        self._roots.discard(child)
        if child in children:
            return
        children.add(child)
        self._r.adding_edge(parent, child)

    def add_node_with_children(
        self, value: T, children: Iterable[NodeId]
    ) -> NodeId:
        """Add a node, then an edge from it to each of `children` in order.

        All child ids are checked before anything is added, so an unknown id
        leaves the graph untouched.
        """
        children = list(children)
        for child in children:
            if child not in self:
                raise InvalidNodeReference(child)
        node_id = self.add_node(value)
        for child in children:
            self.add_edge(node_id, child)
        return node_id

    def has_edge(self, parent: NodeId, child: NodeId) -> bool:
        """Check whether `parent` has a direct edge to `child`."""
        if child not in self:
            raise InvalidNodeReference(child)
        return child in self.node(parent).children

    def iter_children(self, key: NodeId) -> Iterator[NodeId]:
        """Iterate the direct children of `key` in ascending id order."""
        return iter(sorted(self.node(key).children))

    def iter_edges(self) -> Iterator[tuple[NodeId, NodeId]]:
        """Iterate every `(parent, child)` edge in the graph."""
        for parent in self:
            for child in sorted(self._nodes[parent].children):
                yield parent, child

    def find_cycle(self) -> list[NodeId] | None:
        """Search the graph for a cycle.

        Returns the cycle as a list of ids that starts and ends on the same
        node, or None if the graph is acyclic.
        """
        done: set[NodeId] = set()
        for root in sorted(self._roots):
            if root in done:
                continue
            path = _find_cycle_from(self._nodes, root, done)
            if path is not None:
                self._r.cycle_found(path)
                return path

        # Every node not reachable from a root sits below a cycle with no
        # root above it. Walk from those too so such cycles are found.
        for key in self:
            if key in done:
                continue
            path = _find_cycle_from(self._nodes, key, done)
            if path is not None:
                self._r.cycle_found(path)
                return path
        return None

    def cycle_check(self) -> bool:
        """Check whether the graph contains a cycle."""
        return self.find_cycle() is not None

    def _ensure_acyclic(self) -> None:
        path = self.find_cycle()
        if path is not None:
            raise CycleDetected(path)

    def count_edges(self) -> int:
        """Count the edges reachable from the roots.

        Each node is expanded once no matter how many paths lead to it, so
        every edge out of a reachable node is counted exactly once.

        :raises CycleDetected: if the graph contains a cycle.
        """
        self._ensure_acyclic()
        visited: set[NodeId] = set()
        count = 0
        for root in sorted(self._roots):
            if root in visited:
                continue
            visited.add(root)
            stack = [root]
            while stack:
                key = stack.pop()
                for child in self._nodes[key].children:
                    count += 1
                    if child not in visited:
                        visited.add(child)
                        stack.append(child)
        return count

    def _iter_descendants(
        self, key: NodeId, seen: set[NodeId]
    ) -> Iterator[NodeId]:
        """Yield nodes reachable from `key` by one or more hops.

        Nodes already in `seen` are skipped along with everything below
        them; every yielded node is added to `seen`.
        """
        stack = sorted(self._nodes[key].children, reverse=True)
        while stack:
            current = stack.pop()
            if current in seen:
                continue
            seen.add(current)
            yield current
            stack.extend(sorted(self._nodes[current].children, reverse=True))

    def _reduce_node(self, key: NodeId, snapshot: list[NodeId]) -> int:
        # The node itself is never a descendant of its children, so its live
        # edge set can shrink while the walk below is in progress.
        children = self._nodes[key].children
        seen: set[NodeId] = set()
        removed = 0
        for child in snapshot:
            for descendant in self._iter_descendants(child, seen):
                if descendant not in children:
                    continue
                self._r.removing_edge(key, descendant)
                children.remove(descendant)
                removed += 1
        return removed

    def transitive_reduce(self) -> int:
        """Remove edges implied by a longer path between the same nodes.

        Working down from the roots, each node drops its direct edge to any
        node it can also reach through one of its children. Reachability is
        unchanged, and so is the set of roots. Returns the number of edges
        removed.

        :raises CycleDetected: if the graph contains a cycle. The graph is
            left unmodified in that case.
        """
        self._ensure_acyclic()
        self._r.starting_reduction()

        removed = 0
        reduced: set[NodeId] = set()
        stack = sorted(self._roots, reverse=True)
        while stack:
            key = stack.pop()
            if key in reduced:
                continue
            reduced.add(key)
            snapshot = sorted(self._nodes[key].children)
            removed += self._reduce_node(key, snapshot)
            stack.extend(reversed(snapshot))

        self._r.ending_reduction(removed)
        return removed
