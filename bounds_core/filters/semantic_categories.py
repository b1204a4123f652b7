"""Externalized boundary category definitions.

These frozensets are the default allowlists for relation selection. They
are handed to the predicates through BoundaryConfig, so alternate lists can
be used without modifying core code.
"""
from typing import Dict, FrozenSet, Iterable

# admin_level values accepted for candidate relations
CANDIDATE_ADMIN_LEVELS: FrozenSet[str] = frozenset({'2', '4', '6', '7', '8'})

# boundary values accepted for target relations
TARGET_BOUNDARY_TYPES: FrozenSet[str] = frozenset({
    'administrative', 'state_border', 'country_border', 'state border'
})

# Common meaning of admin_level values, for help and log output
ADMIN_LEVEL_NAMES: Dict[str, str] = {
    '2': 'country',
    '3': 'region',
    '4': 'state',
    '5': 'region',
    '6': 'county',
    '7': 'municipality',
    '8': 'city',
    '9': 'district',
    '10': 'suburb',
    '11': 'neighbourhood',
}


def describe_admin_levels(levels: Iterable[str]) -> str:
    """Render admin_level values with their names, e.g. '2 (country), 4 (state)'.

    Numeric levels sort numerically; levels without a known name are shown bare.
    """
    def sort_key(level):
        return (0, int(level), '') if level.isdigit() else (1, 0, level)

    parts = []
    for level in sorted(levels, key=sort_key):
        name = ADMIN_LEVEL_NAMES.get(level)
        parts.append(f"{level} ({name})" if name else level)
    return ', '.join(parts)
