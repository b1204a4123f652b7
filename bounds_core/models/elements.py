"""OSM Element data models.

Nodes, ways and relations are independent dataclasses; code that needs to
treat them uniformly dispatches on the concrete type through the helpers at
the bottom of this module.
"""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, NamedTuple, Optional, Union


class ElementType(IntEnum):
    """OSM element kind. The integer value fixes the ordering of ObjectIds."""
    NODE = 0
    WAY = 1
    RELATION = 2

    @property
    def label(self) -> str:
        """Lowercase name used in serialized records ('node', 'way', 'relation')."""
        return self.name.lower()

    @property
    def code(self) -> str:
        """One-letter code as used by osmium ('n', 'w', 'r')."""
        return self.label[0]

    @classmethod
    def parse(cls, text: str) -> 'ElementType':
        """Parse a label or a one-letter osmium code.

        Args:
            text: 'node', 'way', 'relation', 'n', 'w' or 'r'

        Returns:
            Matching ElementType

        Raises:
            ValueError: If the text names no element type
        """
        value = text.strip().lower()
        for element_type in cls:
            if value in (element_type.label, element_type.code):
                return element_type
        raise ValueError(f"Unknown OSM element type: {text!r}")


class ObjectId(NamedTuple):
    """Typed OSM identifier. Ordered by element type, then numeric ID."""
    type: ElementType
    ref: int

    @classmethod
    def node(cls, ref: int) -> 'ObjectId':
        return cls(ElementType.NODE, ref)

    @classmethod
    def way(cls, ref: int) -> 'ObjectId':
        return cls(ElementType.WAY, ref)

    @classmethod
    def relation(cls, ref: int) -> 'ObjectId':
        return cls(ElementType.RELATION, ref)

    def __str__(self) -> str:
        return f"{self.type.code}{self.ref}"


class RelationMember(NamedTuple):
    """A typed member reference with its role inside a relation."""
    ref: ObjectId
    role: str = ''

    def to_record(self) -> Dict[str, Any]:
        return {'type': self.ref.type.label, 'id': self.ref.ref, 'role': self.role}

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'RelationMember':
        ref = ObjectId(ElementType.parse(record['type']), int(record['id']))
        return cls(ref, record.get('role', ''))


@dataclass
class OSMNode:
    """OSM Node with tags and an optional location.

    The location is carried through untouched; nothing in osmbounds
    interprets coordinates.
    """
    id: int
    tags: Dict[str, str] = field(default_factory=dict)
    lat: Optional[float] = None
    lon: Optional[float] = None

    @property
    def object_id(self) -> ObjectId:
        return ObjectId(ElementType.NODE, self.id)

    def to_record(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible record."""
        record: Dict[str, Any] = {'type': 'node', 'id': self.id, 'tags': dict(self.tags)}
        if self.lat is not None and self.lon is not None:
            record['lat'] = self.lat
            record['lon'] = self.lon
        return record


@dataclass
class OSMWay:
    """OSM Way with ordered node references and tags."""
    id: int
    node_refs: List[int] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def object_id(self) -> ObjectId:
        return ObjectId(ElementType.WAY, self.id)

    def to_record(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible record."""
        return {
            'type': 'way',
            'id': self.id,
            'tags': dict(self.tags),
            'nodes': list(self.node_refs),
        }


@dataclass
class OSMRelation:
    """OSM Relation with members and tags.

    Represents a logical grouping of elements (nodes, ways, other relations)
    with roles and associated tags. Members are referenced by ID only.
    """
    id: int
    members: List[RelationMember] = field(default_factory=list)
    tags: Dict[str, str] = field(default_factory=dict)

    @property
    def object_id(self) -> ObjectId:
        return ObjectId(ElementType.RELATION, self.id)

    @property
    def member_count(self) -> int:
        """Get the number of members in this relation."""
        return len(self.members)

    def get_members_by_type(self, member_type: ElementType) -> List[RelationMember]:
        """Get all members of a specific type.

        Args:
            member_type: ElementType of the wanted members

        Returns:
            Members of that type, in relation order
        """
        return [m for m in self.members if m.ref.type == member_type]

    def get_members_by_role(self, role: str) -> List[RelationMember]:
        """Get all members with a specific role.

        Args:
            role: The role to filter by (e.g., 'outer', 'inner', 'admin_centre')

        Returns:
            Members with the specified role, in relation order
        """
        return [m for m in self.members if m.role == role]

    def to_record(self) -> Dict[str, Any]:
        """Convert to a JSON-compatible record."""
        return {
            'type': 'relation',
            'id': self.id,
            'tags': dict(self.tags),
            'members': [m.to_record() for m in self.members],
        }


OSMObject = Union[OSMNode, OSMWay, OSMRelation]


def dependencies(obj: OSMObject) -> List[ObjectId]:
    """IDs an object references directly.

    Relations depend on all of their members regardless of role, ways on
    their nodes, nodes on nothing.

    Raises:
        TypeError: If obj is not an OSM element
    """
    if isinstance(obj, OSMRelation):
        return [m.ref for m in obj.members]
    if isinstance(obj, OSMWay):
        return [ObjectId(ElementType.NODE, ref) for ref in obj.node_refs]
    if isinstance(obj, OSMNode):
        return []
    raise TypeError(f"Not an OSM element: {type(obj).__name__}")


def object_from_record(record: Dict[str, Any]) -> OSMObject:
    """Rebuild an element from the record produced by its ``to_record``.

    Raises:
        ValueError: If the record type is unknown
        KeyError: If a required field is missing
    """
    element_type = ElementType.parse(record['type'])
    tags = dict(record.get('tags', {}))
    object_id = int(record['id'])

    if element_type is ElementType.RELATION:
        members = [RelationMember.from_record(m) for m in record.get('members', [])]
        return OSMRelation(object_id, members, tags)
    if element_type is ElementType.WAY:
        return OSMWay(object_id, [int(ref) for ref in record.get('nodes', [])], tags)
    return OSMNode(object_id, tags, record.get('lat'), record.get('lon'))
