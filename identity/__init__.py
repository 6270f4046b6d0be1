# Identity Resolution Module
# Canonical team, analyst and sport identities for consensus bucketing

from .name_normalizer import (
    clean_team_name,
    standardize_team_name,
    identify_sport,
    normalize_capper_name,
    normalize_sport,
    UNKNOWN_CAPPER,
)
from .team_mappings import TEAM_MAPPINGS

__all__ = [
    'clean_team_name',
    'standardize_team_name',
    'identify_sport',
    'normalize_capper_name',
    'normalize_sport',
    'UNKNOWN_CAPPER',
    'TEAM_MAPPINGS',
]
