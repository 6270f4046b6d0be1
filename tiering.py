"""
TIERING.PY - SINGLE SOURCE OF TRUTH FOR FIRE TIERS
==================================================

This module is the ONLY place fire tiers are defined.
All other files should import from here via:
    from tiering import tier_from_count, is_fire, get_tier_config

Tiers are presentational bucketing of capperCount, never separate data.

TIER HIERARCHY (highest to lowest):
1. MAX_FIRE - capperCount >= 10
2. NUCLEAR  - capperCount >= 5
3. HOT      - capperCount == 4
4. FIRE     - capperCount == 3 (minimum fire tier)
5. NONE     - capperCount < 3 (still a valid consensus at 2)
"""

from typing import Any, Dict, List

# =============================================================================
# THRESHOLDS
# =============================================================================
FIRE_THRESHOLD = 3
MAX_CONFIDENCE_CAPPERS = 10

# =============================================================================
# TIER CONFIGURATION - SINGLE SOURCE OF TRUTH
# =============================================================================
TIER_CONFIG = {
    "MAX_FIRE": {
        "badge": "🔥🔥🔥🔥",
        "priority": 1,
        "min_cappers": 10,
        "description": "Maximum emphasis - 10+ analysts agree"
    },
    "NUCLEAR": {
        "badge": "🔥🔥🔥",
        "priority": 2,
        "min_cappers": 5,
        "description": "Top tier - 5+ analysts agree"
    },
    "HOT": {
        "badge": "🔥🔥",
        "priority": 3,
        "min_cappers": 4,
        "description": "Upper tier - 4 analysts agree"
    },
    "FIRE": {
        "badge": "🔥",
        "priority": 4,
        "min_cappers": 3,
        "description": "Fire pick - 3 analysts agree"
    },
    "NONE": {
        "badge": "",
        "priority": 5,
        "min_cappers": 0,
        "description": "Consensus without fire"
    },
}

# Tiers in the order they are checked
TIER_ORDER: List[str] = ["MAX_FIRE", "NUCLEAR", "HOT", "FIRE", "NONE"]


def get_tier_config(tier: str) -> Dict[str, Any]:
    """Badge, priority and description for a tier (NONE for unknown names)."""
    return TIER_CONFIG.get(tier, TIER_CONFIG["NONE"])


def tier_from_count(capper_count: int) -> str:
    """
    Fire tier for a number of distinct agreeing analysts.

    Example:
        >>> tier_from_count(2)
        'NONE'
        >>> tier_from_count(4)
        'HOT'
        >>> tier_from_count(12)
        'MAX_FIRE'
    """
    for tier in TIER_ORDER:
        if capper_count >= TIER_CONFIG[tier]["min_cappers"]:
            return tier
    return "NONE"


def is_fire(capper_count: int) -> bool:
    """Exactly capper_count >= 3."""
    return capper_count >= FIRE_THRESHOLD


def confidence_from_count(capper_count: int) -> float:
    """Agreement normalized into [0, 1]."""
    return min(capper_count / MAX_CONFIDENCE_CAPPERS, 1.0)
