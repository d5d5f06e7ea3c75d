import logging
from dataclasses import replace

from ..annotations import Attribute, Entity, EquivalenceGroup, Event, Note, NotFoundError, Relation
from .document import Document

logger = logging.getLogger(__name__)


class Renumber:
    def __init__(self, document: Document):
        """
        Renumber entities by ascending text position and rewrite every reference to them.
        The source document is only read; a new document is built on each call.
        :param document: Source document
        """
        self.document = document
        self.id_map: dict[str, str] = {}

    def __call__(self, prefix: str = "T", start: int = 0, remap_attributes: bool = True):
        """
        :param prefix: Prefix of the new entity ids
        :param start: Number of the first entity
        :param remap_attributes: Rewrite attribute targets too. False keeps attributes as they are.
        :return: New document with entities T<start>, T<start+1>, ... in text order
        """
        entities = self.sort_entities(self.document.get_entities())
        id_map = {entity.id: f"{prefix}{i + start}" for i, entity in enumerate(entities)}

        remapped = Document(doc_id=self.document.doc_id, text=self.document.text)
        for entity in entities:
            remapped.add_annotation(replace(entity, id=id_map[entity.id], spans=list(entity.spans)))
        for ann in self.document:
            if isinstance(ann, Entity):
                continue
            remapped.add_annotation(self.remap_annotation(ann, id_map, remap_attributes=remap_attributes))

        self.id_map = id_map
        logger.debug("Renumbered %d entities in document %s", len(entities), self.document.doc_id)
        return remapped

    @staticmethod
    def sort_entities(entities: list[Entity]):
        """ Stable sort on the begin offset of the first span; ties keep insertion order."""
        return sorted(entities, key=lambda entity: entity.spans[0][0])

    def remap_annotation(self, ann, id_map: dict[str, str], remap_attributes: bool = True):
        if isinstance(ann, Event):
            return replace(ann,
                           trigger=self.remap_entity_id(ann.trigger, id_map, referrer=ann.id),
                           arguments={role: self.remap_id(arg_id, id_map, referrer=ann.id)
                                      for role, arg_id in ann.arguments.items()})
        if isinstance(ann, Relation):
            return replace(ann, arguments={role: self.remap_id(arg_id, id_map, referrer=ann.id)
                                           for role, arg_id in ann.arguments.items()})
        if isinstance(ann, EquivalenceGroup):
            return replace(ann, members=[self.remap_entity_id(member, id_map, referrer=ann.id)
                                         for member in ann.members])
        if isinstance(ann, Note):
            return replace(ann, ref_id=self.remap_id(ann.ref_id, id_map, referrer=ann.id))
        if isinstance(ann, Attribute) and remap_attributes:
            return replace(ann, ref_id=self.remap_id(ann.ref_id, id_map, referrer=ann.id))
        return replace(ann)

    @staticmethod
    def remap_entity_id(id: str, id_map: dict[str, str], referrer: str | None = None):
        """ Translate a reference that must point at an entity."""
        try:
            return id_map[id]
        except KeyError:
            raise NotFoundError(id, referrer=referrer)

    def remap_id(self, id: str, id_map: dict[str, str], referrer: str | None = None):
        """ Translate a reference that may point at an entity or at any other annotation of the source document."""
        if id in id_map:
            return id_map[id]
        if not self.document.contains_id(id):
            raise NotFoundError(id, referrer=referrer)
        return id
