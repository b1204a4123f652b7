"""Data models for OSM elements, closure results and boundary statistics."""

from bounds_core.models.elements import (
    ElementType, ObjectId, RelationMember, OSMNode, OSMWay, OSMRelation,
    OSMObject, dependencies, object_from_record,
)
from bounds_core.models.result_set import ResultSet, ClosureStats
from bounds_core.models.statistics import BoundaryTally

__all__ = [
    'ElementType', 'ObjectId', 'RelationMember', 'OSMNode', 'OSMWay', 'OSMRelation',
    'OSMObject', 'dependencies', 'object_from_record',
    'ResultSet', 'ClosureStats', 'BoundaryTally',
]
