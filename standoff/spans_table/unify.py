import networkx as nx

from ..annotations import Entity


class OverlapComponentUnifier:
    def __init__(self, entities: list[Entity]):
        self.entities = entities

    def __call__(self):
        components = [sorted(component, key=lambda entity: (entity.begin, entity.end))
                      for component in self.get_overlap_components()]
        return sorted(components, key=lambda component: (component[0].begin, component[0].end))

    def get_overlap_components(self):
        """
        Group entities whose spans overlap, directly or through other entities.
        """
        overlap_components = []
        graph = nx.Graph()
        for i, entity in enumerate(self.entities):
            graph.add_node(i, entity=entity)

        for i, e1 in enumerate(self.entities):
            for j, e2 in enumerate(self.entities[i+1:], start=i+1):
                if e1.overlaps(e2):
                    graph.add_edge(i, j)

        for component in nx.connected_components(graph):
            overlap_components.append([graph.nodes[i]["entity"] for i in sorted(component)])
        return overlap_components
