"""
Core module - shared constants, ET time handling, snapshots and logging
"""

# Import time_et (SINGLE SOURCE OF TRUTH for ET timezone)
from .time_et import (
    ET,
    now_et,
    today_et,
    yesterday_et,
    et_day_bounds,
    is_in_et_day,
)

from .sports import Sport, SUPPORTED_SPORTS, EXCLUDED_SPORTS

__all__ = [
    # Time handling (SINGLE SOURCE OF TRUTH)
    'ET',
    'now_et',
    'today_et',
    'yesterday_et',
    'et_day_bounds',
    'is_in_et_day',

    # Sports
    'Sport',
    'SUPPORTED_SPORTS',
    'EXCLUDED_SPORTS',
]
