import pytest

from dagarena import Node, NodeId
from dagarena.exceptions import CycleDetected, DagException, InvalidNodeReference


@pytest.fixture()
def node():
    return Node("payload")


def test_node(node):
    assert node.value == "payload"
    assert node.children == set()
    node.children.update({NodeId(3), NodeId(1)})
    assert repr(node) == "Node('payload', children=[1, 3])"


def test_node_copy(node):
    node.children.add(NodeId(1))
    other = node.copy()
    other.children.add(NodeId(2))
    assert other.value is node.value
    assert node.children == {1}
    assert other.children == {1, 2}


def test_nodes_with_equal_values_are_not_equal():
    assert Node("x") != Node("x")
    assert len({Node("x"), Node("x")}) == 2


@pytest.mark.parametrize("exc_type", [InvalidNodeReference, CycleDetected])
def test_exceptions_share_a_base(exc_type):
    assert issubclass(exc_type, DagException)


def test_cycle_detected_copies_path():
    path = [NodeId(0), NodeId(1), NodeId(0)]
    e = CycleDetected(path)
    path.append(NodeId(5))
    assert e.path == [0, 1, 0]
    assert str(e) == "graph contains a cycle: 0 -> 1 -> 0"
