"""Text rendering of battle results and forecasts."""
from typing import Optional

from ..core.data import BattleOutcome, OUTCOME_NAMES, Team, TEAM_NAMES
from .combat.battle_calculator import BattleForecast
from .combat.battle_orchestrator import BattleResult
from .entities.transformer import Transformer


def format_outcome(outcome: Optional[BattleOutcome]) -> str:
    if outcome is None:
        return "No battle"
    return OUTCOME_NAMES[outcome]


def _names(transformers: tuple[Transformer, ...]) -> str:
    return ", ".join(t.name for t in transformers) if transformers else "none"


class BattleReport:
    """Builds display lines for the terminal."""

    @staticmethod
    def build(result: BattleResult) -> list[str]:
        lines = [f"Rounds fought: {result.rounds_played}"]

        for round_result in result.round_results:
            lines.append(
                f"  {round_result.round_number}. {round_result.autobot.name} "
                f"vs {round_result.decepticon.name}: {format_outcome(round_result.outcome)}"
            )

        for team in Team:
            lines.append(f"{TEAM_NAMES[team]} survivors: {_names(result.survivors_for(team))}")
            lines.append(f"{TEAM_NAMES[team]} casualties: {_names(result.casualties_for(team))}")

        lines.append(f"Result: {format_outcome(result.final_outcome)}")
        return lines

    @staticmethod
    def build_forecast(forecast: BattleForecast) -> list[str]:
        lines = [f"Planned rounds: {forecast.planned_rounds}"]
        for team in Team:
            team_forecast = forecast.for_team(team)
            lines.append(
                f"{TEAM_NAMES[team]}: {team_forecast.count} fielded, {team_forecast.byes} byes, "
                f"rating {team_forecast.total_rating} (mean {team_forecast.mean_rating:.1f}), "
                f"{team_forecast.legendary_count} legendary"
            )
        if forecast.ends_in_destruction:
            lines.append(
                f"Warning: two legendaries meet in round {forecast.destruction_round}, "
                "mutual destruction ends the battle"
            )
        return lines
