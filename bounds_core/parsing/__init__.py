"""OSM object decoding and dependency closure loading."""

from bounds_core.parsing.pbf_source import PBFObjectSource
from bounds_core.parsing.closure import DependencyClosureLoader, load_closure

__all__ = ['PBFObjectSource', 'DependencyClosureLoader', 'load_closure']
