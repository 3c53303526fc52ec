"""
Battle forecast calculations.

This module previews a battle without resolving it, so a listing screen can
show who will fight whom and how the teams compare before anyone commits.
"""
from dataclasses import dataclass
from typing import Iterable, Optional

import numpy as np

from ...core.data import StatArray, Team
from ..entities.sorting import seed_order
from ..entities.transformer import Transformer
from .combat_rules import CombatRules, DEFAULT_RULES


@dataclass(frozen=True)
class TeamForecast:
    """Read-only summary of one team before a battle."""
    team: Team
    count: int
    fighters: int
    byes: int
    total_rating: int
    mean_rating: float
    legendary_count: int
    stat_totals: dict[str, int]


@dataclass(frozen=True)
class BattleForecast:
    """Read-only summary of a battle before it is fought."""
    autobots: TeamForecast
    decepticons: TeamForecast
    planned_rounds: int
    destruction_round: Optional[int] = None  # 1-based round where two legendaries meet

    @property
    def ends_in_destruction(self) -> bool:
        return self.destruction_round is not None

    def for_team(self, team: Team) -> TeamForecast:
        return self.autobots if team is Team.AUTOBOTS else self.decepticons


class BattleCalculator:
    """Calculates battle forecasts and pairings."""

    @staticmethod
    def calculate_forecast(
        transformers: Iterable[Transformer], rules: CombatRules = DEFAULT_RULES
    ) -> BattleForecast:
        """
        Summarise both teams of a roster.

        Args:
            transformers: Mixed, unsorted roster
            rules: Rules deciding who counts as legendary

        Returns:
            BattleForecast with per-team figures and the planned round count
        """
        roster = list(transformers)
        autobots = [t for t in roster if t.team is Team.AUTOBOTS]
        decepticons = [t for t in roster if t.team is Team.DECEPTICONS]

        # Rounds are only fought when both teams field someone
        planned_rounds = min(len(autobots), len(decepticons))

        autobot_forecast = BattleCalculator._team_forecast(Team.AUTOBOTS, autobots, planned_rounds, rules)
        decepticon_forecast = BattleCalculator._team_forecast(
            Team.DECEPTICONS, decepticons, planned_rounds, rules
        )

        return BattleForecast(
            autobots=autobot_forecast,
            decepticons=decepticon_forecast,
            planned_rounds=planned_rounds,
            destruction_round=BattleCalculator.destruction_round(roster, rules),
        )

    @staticmethod
    def _team_forecast(
        team: Team, members: list[Transformer], planned_rounds: int, rules: CombatRules
    ) -> TeamForecast:
        stats = StatArray(members)
        legendary_mask = np.array([rules.is_legendary(t) for t in members], dtype=bool)
        return TeamForecast(
            team=team,
            count=len(members),
            fighters=planned_rounds,
            byes=len(members) - planned_rounds,
            total_rating=stats.total_rating(),
            mean_rating=stats.mean_rating(),
            legendary_count=int(np.count_nonzero(legendary_mask)),
            stat_totals=stats.stat_totals(),
        )

    @staticmethod
    def pairings(transformers: Iterable[Transformer]) -> list[tuple[Transformer, Transformer]]:
        """Seeded (autobot, decepticon) pairs in the order they would fight.

        Byes are left out. Pairs after a destruction round are still listed
        since nothing is resolved here.
        """
        roster = list(transformers)
        autobots = seed_order(t for t in roster if t.team is Team.AUTOBOTS)
        decepticons = seed_order(t for t in roster if t.team is Team.DECEPTICONS)
        return list(zip(autobots, decepticons))

    @staticmethod
    def destruction_round(
        transformers: Iterable[Transformer], rules: CombatRules = DEFAULT_RULES
    ) -> Optional[int]:
        """First round in which two legendaries are paired, or None.

        Legendaries on byes or paired with ordinary opponents never clash.
        """
        for round_number, (autobot, decepticon) in enumerate(
            BattleCalculator.pairings(transformers), start=1
        ):
            if rules.is_legendary(autobot) and rules.is_legendary(decepticon):
                return round_number
        return None
