"""
Combat resolution for a single transformer against a single opponent.

Rules are checked in a fixed order and the first one that applies decides:

1. Legendary status overrides everything. Two legendaries destroy each
   other, one legendary always wins.
2. A large enough gap in courage, strength or skill decides the fight,
   checked in that order, first in the transformer's favour then in the
   opponent's.
3. Otherwise the higher rating wins, and equal ratings tie.

Team membership is not considered, so any two transformers can spar.
"""

from ...core.data import CombatOutcome
from ..entities.transformer import Transformer
from .combat_rules import CombatRules, DEFAULT_RULES


def resolve_combat(
    transformer: Transformer,
    opponent: Transformer,
    rules: CombatRules = DEFAULT_RULES,
) -> CombatOutcome:
    """Decide a fight from `transformer`'s point of view."""
    special = rules.is_legendary(transformer)
    opponent_special = rules.is_legendary(opponent)

    if special and opponent_special:
        return CombatOutcome.DESTRUCTION
    if special:
        return CombatOutcome.WIN
    if opponent_special:
        return CombatOutcome.LOSS

    if transformer.courage >= opponent.courage + rules.courage_threshold:
        return CombatOutcome.WIN
    if transformer.strength >= opponent.strength + rules.strength_threshold:
        return CombatOutcome.WIN
    if transformer.skill >= opponent.skill + rules.skill_threshold:
        return CombatOutcome.WIN
    if transformer.courage + rules.courage_threshold <= opponent.courage:
        return CombatOutcome.LOSS
    if transformer.strength + rules.strength_threshold <= opponent.strength:
        return CombatOutcome.LOSS
    if transformer.skill + rules.skill_threshold <= opponent.skill:
        return CombatOutcome.LOSS

    rating = transformer.rating
    opponent_rating = opponent.rating
    if rating > opponent_rating:
        return CombatOutcome.WIN
    if rating < opponent_rating:
        return CombatOutcome.LOSS
    return CombatOutcome.TIE


class CombatResolver:
    """Resolves fights under one fixed rule set."""

    def __init__(self, rules: CombatRules = DEFAULT_RULES):
        self.rules = rules

    def resolve(self, transformer: Transformer, opponent: Transformer) -> CombatOutcome:
        return resolve_combat(transformer, opponent, self.rules)
