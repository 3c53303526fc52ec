"""
Team-versus-team battles built from repeated one-on-one combat.

A battle splits a mixed roster into Autobots and Decepticons, seeds each
team by rank (then name, then id), sets aside the lowest seeds of the larger
team as byes, and pairs the rest off in seed order. Each pairing is resolved
by the combat resolver and recorded as a round. The team with fewer
casualties wins; ties cost both teams a casualty so they never tip the
balance.

Battles are pure: inputs are never mutated and the same roster always gives
the same result. Progress can optionally be observed through an
EventManager, which does not influence the outcome.
"""
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, TYPE_CHECKING

from ...core.data import BattleOutcome, CombatOutcome, Team, TEAM_WIN_OUTCOMES, OUTCOME_NAMES
from ...core.events import BattleEnded, BattleStarted, ByeAwarded, LogMessage, RoundResolved
from ..entities.sorting import seed_order
from ..entities.transformer import Transformer
from .combat_resolver import CombatResolver
from .combat_rules import CombatRules, DEFAULT_RULES

if TYPE_CHECKING:
    from ...core.events import EventManager, GameEvent


class BattleError(Exception):
    """Base class for battle setup errors."""


class TraitorError(BattleError):
    """A transformer was placed in the other team's list."""

    def __init__(self, transformer: Transformer, listed_team: Team):
        self.transformer = transformer
        self.listed_team = listed_team
        super().__init__(
            f"{transformer.name_including_team} found amongst the {listed_team.name.lower()}"
        )


class TraitorAutobotError(TraitorError):
    """An Autobot was found in the Decepticon list."""


class TraitorDecepticonError(TraitorError):
    """A Decepticon was found in the Autobot list."""


@dataclass(frozen=True)
class RoundResult:
    """One resolved autobot/decepticon pairing."""
    round_number: int  # 1-based
    autobot: Transformer
    decepticon: Transformer
    outcome: BattleOutcome


@dataclass(frozen=True)
class BattleResult:
    """Everything a battle produced.

    `final_outcome` is None only when neither team fielded anyone.
    Starting rosters are in seed order. Survivors list round winners in the
    order they won, followed by byes in seed order.
    """
    final_outcome: Optional[BattleOutcome]
    round_results: tuple[RoundResult, ...]
    starting_autobots: tuple[Transformer, ...]
    starting_decepticons: tuple[Transformer, ...]
    autobot_casualties: tuple[Transformer, ...]
    decepticon_casualties: tuple[Transformer, ...]
    autobot_survivors: tuple[Transformer, ...]
    decepticon_survivors: tuple[Transformer, ...]

    @property
    def rounds_played(self) -> int:
        return len(self.round_results)

    @property
    def winning_team(self) -> Optional[Team]:
        """The winning team, or None for ties, destruction and empty battles."""
        for team, outcome in TEAM_WIN_OUTCOMES.items():
            if self.final_outcome is outcome:
                return team
        return None

    def starting_for(self, team: Team) -> tuple[Transformer, ...]:
        return self.starting_autobots if team is Team.AUTOBOTS else self.starting_decepticons

    def casualties_for(self, team: Team) -> tuple[Transformer, ...]:
        return self.autobot_casualties if team is Team.AUTOBOTS else self.decepticon_casualties

    def survivors_for(self, team: Team) -> tuple[Transformer, ...]:
        return self.autobot_survivors if team is Team.AUTOBOTS else self.decepticon_survivors


_ROUND_OUTCOMES = {
    CombatOutcome.WIN: BattleOutcome.AUTOBOT_WIN,
    CombatOutcome.LOSS: BattleOutcome.DECEPTICON_WIN,
    CombatOutcome.TIE: BattleOutcome.TIE,
    CombatOutcome.DESTRUCTION: BattleOutcome.DESTRUCTION,
}


class _BattleObserver:
    """Publishes battle progress when an event manager is attached."""

    SOURCE = "BattleOrchestrator"

    def __init__(self, event_manager: Optional["EventManager"]):
        self.event_manager = event_manager

    def publish(self, event: "GameEvent") -> None:
        if self.event_manager is not None:
            self.event_manager.publish(event, source=self.SOURCE)

    def log(self, battle_round: int, message: str, level: str = "INFO") -> None:
        self.publish(
            LogMessage(
                battle_round=battle_round,
                message=message,
                category="BATTLE",
                level=level,
                source=self.SOURCE,
            )
        )


def _split_byes(
    seeded: tuple[Transformer, ...], excess: int
) -> tuple[tuple[Transformer, ...], tuple[Transformer, ...]]:
    """Split a seeded team into (fighters, byes), byes taken from the tail."""
    if excess <= 0:
        return seeded, ()
    return seeded[:-excess], seeded[-excess:]


def battle(
    transformers: Iterable[Transformer],
    rules: CombatRules = DEFAULT_RULES,
    event_manager: Optional["EventManager"] = None,
) -> BattleResult:
    """Run a battle over an unsorted, mixed roster.

    Splits the roster by team itself, so unlike `battle_between_teams` it
    never raises.
    """
    roster = list(transformers)
    autobots = [t for t in roster if t.team is Team.AUTOBOTS]
    decepticons = [t for t in roster if t.team is Team.DECEPTICONS]
    return battle_between_teams(autobots, decepticons, rules, event_manager)


def battle_between_teams(
    autobots: Sequence[Transformer],
    decepticons: Sequence[Transformer],
    rules: CombatRules = DEFAULT_RULES,
    event_manager: Optional["EventManager"] = None,
) -> BattleResult:
    """Run a battle between two already-split teams.

    Args:
        autobots: Autobot team, any order
        decepticons: Decepticon team, any order
        rules: Combat rules for every round
        event_manager: Optional bus that receives battle events

    Returns:
        The complete BattleResult

    Raises:
        TraitorDecepticonError: If a Decepticon is in the autobot list
        TraitorAutobotError: If an Autobot is in the decepticon list
    """
    for transformer in autobots:
        if transformer.team is not Team.AUTOBOTS:
            raise TraitorDecepticonError(transformer, Team.AUTOBOTS)
    for transformer in decepticons:
        if transformer.team is not Team.DECEPTICONS:
            raise TraitorAutobotError(transformer, Team.DECEPTICONS)

    observer = _BattleObserver(event_manager)
    resolver = CombatResolver(rules)

    starting_autobots = tuple(seed_order(autobots))
    starting_decepticons = tuple(seed_order(decepticons))

    observer.publish(BattleStarted(0, starting_autobots, starting_decepticons))
    observer.log(
        0, f"Battle: {len(starting_autobots)} Autobots vs {len(starting_decepticons)} Decepticons"
    )

    if not starting_autobots or not starting_decepticons:
        # Nobody to fight: the fielded team wins outright, an empty field has no outcome
        if starting_autobots:
            final_outcome: Optional[BattleOutcome] = BattleOutcome.AUTOBOT_WIN
        elif starting_decepticons:
            final_outcome = BattleOutcome.DECEPTICON_WIN
        else:
            final_outcome = None
        observer.log(0, "No opponents, no rounds fought")
        observer.publish(BattleEnded(0, final_outcome, 0))
        return BattleResult(
            final_outcome=final_outcome,
            round_results=(),
            starting_autobots=starting_autobots,
            starting_decepticons=starting_decepticons,
            autobot_casualties=(),
            decepticon_casualties=(),
            autobot_survivors=starting_autobots,
            decepticon_survivors=starting_decepticons,
        )

    autobot_fighters, autobot_byes = _split_byes(
        starting_autobots, len(starting_autobots) - len(starting_decepticons)
    )
    decepticon_fighters, decepticon_byes = _split_byes(
        starting_decepticons, len(starting_decepticons) - len(starting_autobots)
    )
    assert len(autobot_fighters) == len(decepticon_fighters)

    for bye in autobot_byes + decepticon_byes:
        observer.publish(ByeAwarded(0, bye, bye.team))
        observer.log(0, f"{bye.name_including_team} has no opponent and survives")

    autobot_winners: list[Transformer] = []
    decepticon_winners: list[Transformer] = []
    autobot_casualties: list[Transformer] = []
    decepticon_casualties: list[Transformer] = []
    round_results: list[RoundResult] = []

    for round_number, (autobot, decepticon) in enumerate(
        zip(autobot_fighters, decepticon_fighters), start=1
    ):
        outcome = _ROUND_OUTCOMES[resolver.resolve(autobot, decepticon)]

        if outcome is BattleOutcome.AUTOBOT_WIN:
            autobot_winners.append(autobot)
            decepticon_casualties.append(decepticon)
        elif outcome is BattleOutcome.DECEPTICON_WIN:
            decepticon_winners.append(decepticon)
            autobot_casualties.append(autobot)
        elif outcome is BattleOutcome.TIE:
            autobot_casualties.append(autobot)
            decepticon_casualties.append(decepticon)

        round_results.append(RoundResult(round_number, autobot, decepticon, outcome))
        observer.publish(RoundResolved(round_number, autobot, decepticon, outcome))
        observer.log(
            round_number,
            f"Round {round_number}: {autobot.name} vs {decepticon.name} - {OUTCOME_NAMES[outcome]}",
        )

        if outcome is BattleOutcome.DESTRUCTION:
            # Everyone who started is wiped out, byes included
            observer.log(round_number, "Legendary clash destroys both teams", "WARNING")
            observer.publish(BattleEnded(round_number, outcome, round_number))
            return BattleResult(
                final_outcome=BattleOutcome.DESTRUCTION,
                round_results=tuple(round_results),
                starting_autobots=starting_autobots,
                starting_decepticons=starting_decepticons,
                autobot_casualties=starting_autobots,
                decepticon_casualties=starting_decepticons,
                autobot_survivors=(),
                decepticon_survivors=(),
            )

    autobot_losses = len(autobot_casualties)
    decepticon_losses = len(decepticon_casualties)
    if autobot_losses < decepticon_losses:
        final_outcome = BattleOutcome.AUTOBOT_WIN
    elif autobot_losses > decepticon_losses:
        final_outcome = BattleOutcome.DECEPTICON_WIN
    else:
        final_outcome = BattleOutcome.TIE

    rounds_played = len(round_results)
    observer.log(
        rounds_played,
        f"{OUTCOME_NAMES[final_outcome]} ({autobot_losses} Autobot vs "
        f"{decepticon_losses} Decepticon casualties)",
    )
    observer.publish(BattleEnded(rounds_played, final_outcome, rounds_played))

    return BattleResult(
        final_outcome=final_outcome,
        round_results=tuple(round_results),
        starting_autobots=starting_autobots,
        starting_decepticons=starting_decepticons,
        autobot_casualties=tuple(autobot_casualties),
        decepticon_casualties=tuple(decepticon_casualties),
        autobot_survivors=tuple(autobot_winners) + autobot_byes,
        decepticon_survivors=tuple(decepticon_winners) + decepticon_byes,
    )
