"""Core data structures and definitions.

This package contains fundamental data types shared across the battle system:
- data_structures.py: Stat names and the numpy-backed StatArray
- game_enums.py: Centralized enums for teams, outcomes and sort criteria
"""

from .data_structures import STAT_NAMES, RATING_STATS, StatArray
from .game_enums import (
    Team,
    CombatOutcome,
    BattleOutcome,
    SortCriterion,
    TEAM_NAMES,
    TEAM_MEMBER_NAMES,
    TEAM_WIN_OUTCOMES,
    OUTCOME_NAMES,
)

__all__ = [
    "STAT_NAMES",
    "RATING_STATS",
    "StatArray",
    "Team",
    "CombatOutcome",
    "BattleOutcome",
    "SortCriterion",
    "TEAM_NAMES",
    "TEAM_MEMBER_NAMES",
    "TEAM_WIN_OUTCOMES",
    "OUTCOME_NAMES",
]
