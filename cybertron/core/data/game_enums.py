"""Centralized battle enums and constants.

This module contains the enums shared by the entity, combat and reporting
modules so that every layer agrees on team codes and outcome values.
"""

from enum import Enum, auto


class Team(Enum):
    """Team affiliations, valued by their wire codes."""
    AUTOBOTS = "A"
    DECEPTICONS = "D"

    @property
    def opponent(self) -> "Team":
        """The opposing team."""
        return Team.DECEPTICONS if self is Team.AUTOBOTS else Team.AUTOBOTS


class CombatOutcome(Enum):
    """Outcome of one transformer against one opponent, from the first one's side."""
    WIN = auto()
    LOSS = auto()
    TIE = auto()
    DESTRUCTION = auto()  # Both combatants legendary, everyone is wiped out


class BattleOutcome(Enum):
    """Team-level outcome of a round or of a whole battle."""
    AUTOBOT_WIN = auto()
    DECEPTICON_WIN = auto()
    TIE = auto()
    DESTRUCTION = auto()


class SortCriterion(Enum):
    """Criteria for ordering transformer lists."""
    NAME = auto()
    NAME_DESCENDING = auto()
    TEAM = auto()
    TEAM_DESCENDING = auto()
    RANK = auto()
    RANK_DESCENDING = auto()
    RATING = auto()
    RATING_DESCENDING = auto()


TEAM_NAMES = {
    Team.AUTOBOTS: "Autobots",
    Team.DECEPTICONS: "Decepticons",
}

TEAM_MEMBER_NAMES = {
    Team.AUTOBOTS: "Autobot",
    Team.DECEPTICONS: "Decepticon",
}

TEAM_WIN_OUTCOMES = {
    Team.AUTOBOTS: BattleOutcome.AUTOBOT_WIN,
    Team.DECEPTICONS: BattleOutcome.DECEPTICON_WIN,
}

OUTCOME_NAMES = {
    BattleOutcome.AUTOBOT_WIN: "Autobots win",
    BattleOutcome.DECEPTICON_WIN: "Decepticons win",
    BattleOutcome.TIE: "Tie",
    BattleOutcome.DESTRUCTION: "Mutual destruction",
}
