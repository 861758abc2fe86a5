"""Build a small dependency graph, validate it, and reduce it.

Every hook on the reporter prints, so running this shows each step the graph
takes.
"""

import dagarena

index = """
app
    web
    db
    log
web
    http
    log
http
    log
db
    log
log
"""


def read_index(lines):
    """Parse the index into a mapping of name to dependency names."""
    graph = {}
    latest = None
    for line in lines:
        if not line.strip() or line.startswith("#"):
            continue
        if not line.startswith(" "):
            latest = line.strip()
            graph[latest] = []
        else:
            if latest is None:
                raise RuntimeError("Index has dependencies before first node")
            graph[latest].append(line.strip())
    return graph


class Reporter(dagarena.BaseReporter):
    def __init__(self, names):
        self.names = names

    def adding_node(self, node_id, value):
        print(f"Add node {node_id}: {value}")

    def adding_edge(self, parent, child):
        print(f"Add edge {self.names[parent]} -> {self.names[child]}")

    def cycle_found(self, path):
        print("Cycle:", " -> ".join(self.names[n] for n in path))

    def starting_reduction(self):
        print("Reducing...")

    def removing_edge(self, parent, child):
        print(f"  drop {self.names[parent]} -> {self.names[child]}")

    def ending_reduction(self, removed):
        print(f"Removed {removed} redundant edge(s)")


def main():
    graph = read_index(index.splitlines())

    names = {}
    dag = dagarena.Dag(Reporter(names))
    ids = {}
    for name in graph:
        ids[name] = dag.add_node(name)
        names[ids[name]] = name
    for name, dependencies in graph.items():
        for dependency in dependencies:
            dag.add_edge(ids[name], ids[dependency])

    if dag.cycle_check():
        raise SystemExit("dependency graph is cyclic")

    print("Edges before:", dag.count_edges())
    dag.transitive_reduce()
    print("Edges after:", dag.count_edges())


if __name__ == "__main__":
    main()
