"""Combat system components.

This package contains the battle logic with clear separation of concerns:
- combat_rules.py: Thresholds and legendary names, loadable from YAML
- combat_resolver.py: One transformer against one opponent
- battle_orchestrator.py: Team-versus-team battles built from rounds
- battle_calculator.py: Read-only forecasts and pairings
"""

from .battle_calculator import BattleCalculator, BattleForecast, TeamForecast
from .battle_orchestrator import (
    BattleError,
    BattleResult,
    RoundResult,
    TraitorAutobotError,
    TraitorDecepticonError,
    TraitorError,
    battle,
    battle_between_teams,
)
from .combat_resolver import CombatResolver, resolve_combat
from .combat_rules import CombatRules, DEFAULT_RULES, load_combat_rules, parse_combat_rules

__all__ = [
    "BattleCalculator",
    "BattleForecast",
    "TeamForecast",
    "BattleError",
    "BattleResult",
    "RoundResult",
    "TraitorAutobotError",
    "TraitorDecepticonError",
    "TraitorError",
    "battle",
    "battle_between_teams",
    "CombatResolver",
    "resolve_combat",
    "CombatRules",
    "DEFAULT_RULES",
    "load_combat_rules",
    "parse_combat_rules",
]
