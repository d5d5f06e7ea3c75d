from ..annotations import (Annotation, Attribute, DuplicateIdError, Entity, EquivalenceGroup, Event, Note,
                           NotFoundError, Relation, TypeMismatchError)
from .references import ReferenceGraph


class Document:
    def __init__(self, doc_id: str | None = None, text: str | None = None):
        """
        Annotations of one document, kept in insertion order.
        Identified records are indexed by id and must be unique. Equivalence groups carry no id of their own;
        they are kept in the same ordered sequence but never indexed.
        :param doc_id: Document id, usually the file name without extension
        :param text: Raw document text the entity offsets point into
        """
        self.doc_id = doc_id
        self.text = text
        self._annotations: list[Annotation] = []
        self._ann_by_id: dict[str, Annotation] = {}

    def add_annotation(self, ann: Annotation):
        if not isinstance(ann, EquivalenceGroup):
            if ann.id in self._ann_by_id:
                raise DuplicateIdError(ann.id)
            self._ann_by_id[ann.id] = ann
        self._annotations.append(ann)

    def contains_id(self, id: str):
        return id in self._ann_by_id

    def get_annotation(self, id: str):
        try:
            return self._ann_by_id[id]
        except KeyError:
            raise NotFoundError(id)

    def get_entity(self, id: str) -> Entity:
        return self._get_typed(id, Entity)

    def get_relation(self, id: str) -> Relation:
        return self._get_typed(id, Relation)

    def get_event(self, id: str) -> Event:
        return self._get_typed(id, Event)

    def _get_typed(self, id: str, ann_type: type):
        ann = self.get_annotation(id)
        if not isinstance(ann, ann_type):
            raise TypeMismatchError(id, expected=ann_type.__name__, actual=type(ann).__name__)
        return ann

    def get_annotations(self):
        return list(self._annotations)

    def get_entities(self) -> list[Entity]:
        return self._filter(Entity)

    def get_events(self) -> list[Event]:
        return self._filter(Event)

    def get_relations(self) -> list[Relation]:
        return self._filter(Relation)

    def get_equivalence_groups(self) -> list[EquivalenceGroup]:
        return self._filter(EquivalenceGroup)

    def get_attributes(self, ref_id: str | None = None) -> list[Attribute]:
        """
        :param ref_id: Only return attributes attached to this annotation id
        """
        attributes = self._filter(Attribute)
        if ref_id is not None:
            attributes = [attribute for attribute in attributes if attribute.ref_id == ref_id]
        return attributes

    def get_notes(self, ref_id: str | None = None) -> list[Note]:
        """
        :param ref_id: Only return notes attached to this annotation id
        """
        notes = self._filter(Note)
        if ref_id is not None:
            notes = [note for note in notes if note.ref_id == ref_id]
        return notes

    def _filter(self, ann_type: type):
        return [ann for ann in self._annotations if isinstance(ann, ann_type)]

    def validate(self):
        """ Raise NotFoundError for the first reference that does not resolve within this document."""
        ReferenceGraph(self).validate()

    def copy(self):
        document = Document(doc_id=self.doc_id, text=self.text)
        for ann in self._annotations:
            document.add_annotation(ann)
        return document

    def __contains__(self, id: str):
        return self.contains_id(id)

    def __iter__(self):
        return iter(self._annotations)

    def __len__(self):
        return len(self._annotations)

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return (self.doc_id == other.doc_id
                and self.text == other.text
                and self._annotations == other._annotations)

    def __repr__(self):
        return f"Document(doc_id={self.doc_id!r}, annotations={len(self._annotations)})"
