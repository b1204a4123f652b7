"""Pytest fixtures for osmbounds tests."""
from xml.sax.saxutils import quoteattr

import osmium
import pytest
from loguru import logger

from bounds_core.models.elements import (
    ElementType, ObjectId, OSMNode, OSMRelation, OSMWay, RelationMember
)


class MemorySource:
    """In-memory object source with the same scan contract as PBFObjectSource."""

    def __init__(self, objects):
        self.objects = list(objects)
        self.scans = 0

    def scan(self, visit, wanted=None):
        self.scans += 1
        visited = 0
        for obj in self.objects:
            if wanted is not None and not wanted(obj.object_id):
                continue
            visit(obj)
            visited += 1
        return visited


def _tag_lines(tags, indent='    '):
    return [f'{indent}<tag k={quoteattr(k)} v={quoteattr(v)}/>' for k, v in tags.items()]


def osm_xml(objects) -> str:
    """Render model objects as an OSM XML document."""
    lines = ['<?xml version="1.0" encoding="UTF-8"?>', '<osm version="0.6">']
    for obj in objects:
        if isinstance(obj, OSMNode):
            lat = obj.lat if obj.lat is not None else 0.0
            lon = obj.lon if obj.lon is not None else 0.0
            lines.append(f'  <node id="{obj.id}" lat="{lat}" lon="{lon}">')
            lines.extend(_tag_lines(obj.tags))
            lines.append('  </node>')
        elif isinstance(obj, OSMWay):
            lines.append(f'  <way id="{obj.id}">')
            lines.extend(f'    <nd ref="{ref}"/>' for ref in obj.node_refs)
            lines.extend(_tag_lines(obj.tags))
            lines.append('  </way>')
        elif isinstance(obj, OSMRelation):
            lines.append(f'  <relation id="{obj.id}">')
            for member in obj.members:
                lines.append(
                    f'    <member type="{member.ref.type.label}" ref="{member.ref.ref}" '
                    f'role={quoteattr(member.role)}/>'
                )
            lines.extend(_tag_lines(obj.tags))
            lines.append('  </relation>')
    lines.append('</osm>')
    return '\n'.join(lines) + '\n'


def write_pbf_file(path, objects):
    """Write model objects to an OSM PBF file with osmium.SimpleWriter."""
    writer = osmium.SimpleWriter(str(path))
    try:
        for obj in objects:
            if isinstance(obj, OSMNode):
                lat = obj.lat if obj.lat is not None else 0.0
                lon = obj.lon if obj.lon is not None else 0.0
                location = osmium.osm.Location(lon, lat)
                writer.add_node(osmium.osm.mutable.Node(
                    id=obj.id, location=location, tags=obj.tags))
            elif isinstance(obj, OSMWay):
                writer.add_way(osmium.osm.mutable.Way(
                    id=obj.id, nodes=obj.node_refs, tags=obj.tags))
            elif isinstance(obj, OSMRelation):
                members = [(m.ref.type.code, m.ref.ref, m.role) for m in obj.members]
                writer.add_relation(osmium.osm.mutable.Relation(
                    id=obj.id, members=members, tags=obj.tags))
    finally:
        writer.close()


def admin_relation(rel_id, members=(), **tags):
    """Relation with (type, ref, role) member tuples and keyword tags."""
    return OSMRelation(
        rel_id,
        [RelationMember(ObjectId(t, ref), role) for t, ref, role in members],
        dict(tags),
    )


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop loguru sinks added by CLI runs so they don't outlive capsys."""
    yield
    logger.remove()


@pytest.fixture
def write_osm(tmp_path):
    """Factory writing model objects to an OSM XML file."""
    def _write(objects, name='extract.osm'):
        path = tmp_path / name
        path.write_text(osm_xml(objects), encoding='utf-8')
        return path
    return _write


@pytest.fixture
def write_pbf(tmp_path):
    """Factory writing model objects to an OSM PBF file."""
    def _write(objects, name='extract.osm.pbf'):
        path = tmp_path / name
        write_pbf_file(path, objects)
        return path
    return _write


@pytest.fixture
def boundary_objects():
    """Small extract: a state made of two ways, a county inside it, noise."""
    T = ElementType
    return [
        OSMNode(1, {}, 51.0, -0.1),
        OSMNode(2, {}, 51.0, 0.0),
        OSMNode(3, {}, 51.1, 0.0),
        OSMNode(4, {'place': 'city', 'name': 'Capital'}, 51.05, -0.05),
        OSMNode(9, {'amenity': 'cafe'}, 52.0, 1.0),
        OSMWay(100, [1, 2, 3], {'boundary': 'administrative'}),
        OSMWay(101, [3, 1], {'boundary': 'administrative'}),
        OSMWay(200, [9], {'highway': 'footway'}),
        admin_relation(
            1000,
            [(T.WAY, 100, 'outer'), (T.WAY, 101, 'outer'),
             (T.NODE, 4, 'admin_centre'), (T.RELATION, 1001, 'subarea')],
            name='Test State', admin_level='4', boundary='administrative',
        ),
        admin_relation(
            1001,
            [(T.WAY, 101, 'outer')],
            name='Test County', admin_level='6', boundary='administrative',
        ),
        admin_relation(
            1002, [(T.WAY, 100, 'outer')],
            name='Old Border', admin_level='2', boundary='country_border',
        ),
        admin_relation(
            1003, [(T.WAY, 100, '')],
            name='Unlabelled', admin_level='8',
        ),
        admin_relation(
            1004, [(T.WAY, 200, '')],
            name='Suburb', admin_level='10', boundary='administrative',
        ),
        admin_relation(
            1005, [(T.NODE, 9, '')],
            type='route', route='bus',
        ),
    ]


@pytest.fixture
def boundary_osm_file(write_osm, boundary_objects):
    """boundary_objects written as an OSM XML file."""
    return write_osm(boundary_objects)


@pytest.fixture
def boundary_pbf_file(write_pbf, boundary_objects):
    """boundary_objects written as an OSM PBF file."""
    return write_pbf(boundary_objects)


@pytest.fixture
def memory_source(boundary_objects):
    """boundary_objects as an in-memory source."""
    return MemorySource(boundary_objects)


@pytest.fixture
def make_source():
    """Factory for in-memory object sources."""
    return MemorySource


@pytest.fixture
def make_relation():
    """Factory for relations, see admin_relation."""
    return admin_relation
