import pytest

from dagarena import BaseReporter, Dag


class RecordingReporter(BaseReporter):
    def __init__(self):
        self.events = []

    def adding_node(self, node_id, value):
        self.events.append(("adding_node", node_id, value))

    def adding_edge(self, parent, child):
        self.events.append(("adding_edge", parent, child))

    def cycle_found(self, path):
        self.events.append(("cycle_found", list(path)))

    def starting_reduction(self):
        self.events.append(("starting_reduction",))

    def removing_edge(self, parent, child):
        self.events.append(("removing_edge", parent, child))

    def ending_reduction(self, removed):
        self.events.append(("ending_reduction", removed))

    def named(self, name):
        return [event[1:] for event in self.events if event[0] == name]


@pytest.fixture()
def reporter():
    return RecordingReporter()


@pytest.fixture()
def dag(reporter):
    return Dag(reporter)


def build(dag, values, edges):
    """Populate `dag` and return a mapping of value to node id.

    Values must be unique here so edges can be written in terms of them.
    """
    ids = {value: dag.add_node(value) for value in values}
    for parent, child in edges:
        dag.add_edge(ids[parent], ids[child])
    return ids


# 1 -> 2 -> 4 -> 5, 1 -> 3 -> 4, plus shortcuts 1 -> 4, 1 -> 5 and 3 -> 5.
SCENARIO_A = [(1, 2), (1, 3), (1, 4), (1, 5), (2, 4), (3, 4), (3, 5), (4, 5)]

# A diamond.
SCENARIO_B = [(1, 2), (1, 3), (2, 4), (3, 4)]

# 2 -> 4 -> 3 -> 2 is a cycle below the root.
SCENARIO_C = [(1, 2), (1, 3), (2, 4), (4, 3), (3, 2)]
