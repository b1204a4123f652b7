"""OSM object source backed by pyosmium.

Decodes an OSM file (PBF, or any other format osmium detects from the file
name, such as .osm XML) into OSMNode, OSMWay and OSMRelation objects and
hands them to a visitor in stream order. Files whose name gives no format
are read as PBF. Each call to ``scan`` is one full sequential read of the
file.
"""
import os
from typing import Callable, Optional

import osmium
from loguru import logger

from bounds_core.errors import BoundsIOError, BoundsPermissionError, DecodeError
from bounds_core.models.elements import (
    ElementType, ObjectId, OSMNode, OSMObject, OSMRelation, OSMWay, RelationMember
)

Visitor = Callable[[OSMObject], None]
Wanted = Callable[[ObjectId], bool]

# File name suffixes osmium detects a format from
OSMIUM_SUFFIXES = frozenset({'pbf', 'osm', 'xml', 'osc', 'osh', 'o5m', 'o5c', 'opl'})
COMPRESSION_SUFFIXES = frozenset({'gz', 'bz2'})


def osmium_input(path: str):
    """Input argument for ``apply_file``.

    osmium picks the format from the file name. Names it cannot detect a
    format from (``extract``, ``region.dat``) are read as PBF.
    """
    suffixes = os.path.basename(path).split('.')[1:]
    while suffixes and suffixes[-1] in COMPRESSION_SUFFIXES:
        suffixes.pop()
    if suffixes and suffixes[-1] in OSMIUM_SUFFIXES:
        return path
    return osmium.io.File(path, 'pbf')


def _tags(osm_obj) -> dict:
    return {tag.k: tag.v for tag in osm_obj.tags}


def node_from_osmium(n) -> OSMNode:
    """Copy an osmium node into an OSMNode."""
    lat = lon = None
    if n.location.valid():
        lat, lon = n.location.lat, n.location.lon
    return OSMNode(n.id, _tags(n), lat, lon)


def way_from_osmium(w) -> OSMWay:
    """Copy an osmium way into an OSMWay."""
    return OSMWay(w.id, [node_ref.ref for node_ref in w.nodes], _tags(w))


def relation_from_osmium(r) -> OSMRelation:
    """Copy an osmium relation into an OSMRelation."""
    members = [
        RelationMember(ObjectId(ElementType.parse(m.type), m.ref), m.role)
        for m in r.members
    ]
    return OSMRelation(r.id, members, _tags(r))


class _ScanHandler(osmium.SimpleHandler):
    """Osmium handler forwarding copied objects to a visitor.

    osmium objects are only valid inside the callback, so everything the
    visitor sees is a plain Python copy.
    """

    def __init__(self, visit: Visitor, wanted: Optional[Wanted] = None):
        super().__init__()
        self.visit = visit
        self.wanted = wanted
        self.objects_seen = 0
        self.objects_decoded = 0

    def _accept(self, object_id: ObjectId) -> bool:
        self.objects_seen += 1
        if self.wanted is not None and not self.wanted(object_id):
            return False
        self.objects_decoded += 1
        return True

    def node(self, n):
        if self._accept(ObjectId(ElementType.NODE, n.id)):
            self.visit(node_from_osmium(n))

    def way(self, w):
        if self._accept(ObjectId(ElementType.WAY, w.id)):
            self.visit(way_from_osmium(w))

    def relation(self, r):
        if self._accept(ObjectId(ElementType.RELATION, r.id)):
            self.visit(relation_from_osmium(r))


class PBFObjectSource:
    """Re-readable stream of OSM objects from a file on disk."""

    def __init__(self, path):
        """Initialize source.

        Args:
            path: Path to an OSM PBF file (or another osmium-readable format)
        """
        self.path = os.fspath(path)
        self.scans = 0

    def check_readable(self) -> None:
        """Fail early with a BoundsIOError if the file cannot be opened.

        Raises:
            BoundsIOError: If the file is missing or is not a regular file
            BoundsPermissionError: If the file cannot be read
        """
        try:
            with open(self.path, 'rb'):
                pass
        except FileNotFoundError as e:
            raise BoundsIOError(f"File not found: {self.path}", self.path) from e
        except PermissionError as e:
            raise BoundsPermissionError(f"Permission denied: {self.path}", self.path) from e
        except OSError as e:
            raise BoundsIOError(f"Cannot open {self.path}: {e}", self.path) from e

    def scan(self, visit: Visitor, wanted: Optional[Wanted] = None) -> int:
        """Read the whole file once, calling ``visit`` for each object.

        Args:
            visit: Called with every decoded object, in file order
            wanted: Optional filter on ObjectId; objects it rejects are not
                decoded or visited

        Returns:
            Number of objects visited

        Raises:
            BoundsIOError: If the file cannot be opened
            DecodeError: If osmium fails to decode the file
        """
        self.check_readable()
        self.scans += 1
        handler = _ScanHandler(visit, wanted)

        logger.debug(f"Scan {self.scans} of {self.path}")
        try:
            handler.apply_file(osmium_input(self.path))
        except RuntimeError as e:
            # osmium reports every decoder failure as RuntimeError
            raise DecodeError(f"Cannot decode {self.path}: {e}", self.path) from e

        logger.debug(
            f"Scan {self.scans}: {handler.objects_seen} objects read, "
            f"{handler.objects_decoded} decoded"
        )
        return handler.objects_decoded

    def __repr__(self) -> str:
        return f"PBFObjectSource({self.path!r})"
