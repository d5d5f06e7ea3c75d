import logging

import networkx as nx

from ..annotations import EquivalenceGroup, Event, NotFoundError, Relation

logger = logging.getLogger(__name__)


class ReferenceGraph:
    def __init__(self, document):
        """
        Directed graph of the references between the annotations of a document.
        Nodes are annotation ids; equivalence groups, which have no id, become ("*", position) nodes.
        Edges point from the referring annotation to the referenced id and carry the role of the reference.
        :param document: Document to inspect
        """
        self.document = document
        self.graph = self.build_graph(document)

    @staticmethod
    def build_graph(document):
        graph = nx.MultiDiGraph()
        for position, ann in enumerate(document):
            node = ("*", position) if isinstance(ann, EquivalenceGroup) else ann.id
            graph.add_node(node, record=ann)
        for position, ann in enumerate(document):
            if isinstance(ann, EquivalenceGroup):
                source = ("*", position)
                edges = [("member", member) for member in ann.members]
            elif isinstance(ann, Event):
                source = ann.id
                edges = [("trigger", ann.trigger)] + list(ann.arguments.items())
            elif isinstance(ann, Relation):
                source = ann.id
                edges = list(ann.arguments.items())
            else:
                source = ann.id
                edges = [("ref", target) for target in ann.references()]
            for role, target in edges:
                graph.add_edge(source, target, role=role)
        return graph

    def dangling(self):
        """
        Collect references whose target is not an annotation of the document.
        :return: List of (source, target, role) triples in document order
        """
        missing = [(source, target, role)
                   for source, target, role in self.graph.edges(data="role")
                   if "record" not in self.graph.nodes[target]]
        if missing:
            logger.debug("%d dangling reference(s) in document %s", len(missing), self.document.doc_id)
        return missing

    def dependents(self, id: str):
        """
        Annotations referring to the given id, i.e. those that would break if it were removed.
        :param id: Referenced annotation id
        """
        if id not in self.graph:
            return []
        return list(dict.fromkeys(self.graph.predecessors(id)))

    def validate(self):
        for source, target, role in self.dangling():
            raise NotFoundError(target, referrer=f"{source} ({role})")
