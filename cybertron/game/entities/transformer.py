"""Transformer entity.

A Transformer is one combatant eligible to fight. It is an immutable value:
the battle code never mutates or stores one, and derived figures such as
`rating` are always recomputed from the current stats.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from ...core.data import STAT_NAMES, RATING_STATS, Team, TEAM_NAMES, TEAM_MEMBER_NAMES

LEGENDARY_NAMES: tuple[str, ...] = ("Optimus Prime", "Predaking")


@dataclass(frozen=True)
class Transformer:
    """A ranked combatant belonging to one team."""

    name: str
    team: Team
    rank: int = 0
    strength: int = 0
    intelligence: int = 0
    speed: int = 0
    endurance: int = 0
    courage: int = 0
    firepower: int = 0
    skill: int = 0
    id: Optional[str] = None  # Absent until persisted
    team_icon: Optional[str] = None

    @property
    def rating(self) -> int:
        """Overall rating: strength + intelligence + speed + endurance + firepower."""
        return sum(getattr(self, stat) for stat in RATING_STATS)

    @property
    def is_legendary(self) -> bool:
        """Whether the name is one of the default LEGENDARY_NAMES.

        Battles ask their CombatRules instead, which may name other legends.
        """
        return any(self.has_matching_name(name) for name in LEGENDARY_NAMES)

    @property
    def team_name(self) -> str:
        return TEAM_NAMES[self.team]

    @property
    def name_including_team(self) -> str:
        """Display name prefixed with the team member noun, e.g. "Autobot Bumblebee"."""
        return f"{TEAM_MEMBER_NAMES[self.team]} {self.name}"

    @property
    def stats(self) -> dict[str, int]:
        return {stat: getattr(self, stat) for stat in STAT_NAMES}

    def has_matching_name(self, name: str) -> bool:
        """Case-insensitive name comparison."""
        return self.name.casefold() == name.casefold()

    def has_matching_id(self, transformer_id: str) -> bool:
        return self.id == transformer_id

    def copy(self, include_id: bool = False, **changes: Any) -> "Transformer":
        """Copy this transformer, dropping the id unless asked to keep it.

        Args:
            include_id: Keep the source id on the copy
            **changes: Field values to replace on the copy
        """
        if not include_id and "id" not in changes:
            changes["id"] = None
        return replace(self, **changes)

    def validate(self) -> list[str]:
        """Describe every reason this transformer is unfit for battle.

        Returns:
            List of problems, empty when the transformer is valid
        """
        problems = []
        if not self.name.strip():
            problems.append("name must not be empty")
        if self.rank < 0:
            problems.append(f"rank must not be negative (got {self.rank})")
        for stat, value in self.stats.items():
            if value < 0:
                problems.append(f"{stat} must not be negative (got {value})")
        return problems

    def to_dict(self, include_id: bool = True) -> dict[str, Any]:
        """Serialize using the remote record layout ("team" is "A" or "D")."""
        data: dict[str, Any] = {}
        if include_id and self.id is not None:
            data["id"] = self.id
        data["name"] = self.name
        data["team"] = self.team.value
        data["rank"] = self.rank
        data.update(self.stats)
        if self.team_icon is not None:
            data["team_icon"] = self.team_icon
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Transformer":
        """Build a transformer from a remote-style record.

        Raises:
            ValueError: If a required field is missing or has the wrong type
        """
        try:
            team = parse_team(data["team"])
            values = {
                "name": str(data["name"]),
                "team": team,
                "rank": int(data["rank"]),
                "id": None if data.get("id") is None else str(data["id"]),
                "team_icon": data.get("team_icon", data.get("teamIcon")),
            }
            for stat in STAT_NAMES:
                values[stat] = int(data[stat])
        except KeyError as e:
            raise ValueError(f"Transformer record is missing field {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid transformer record {data!r}: {e}")
        return cls(**values)


_TEAM_ALIASES = {
    "a": Team.AUTOBOTS,
    "autobot": Team.AUTOBOTS,
    "autobots": Team.AUTOBOTS,
    "d": Team.DECEPTICONS,
    "decepticon": Team.DECEPTICONS,
    "decepticons": Team.DECEPTICONS,
}


def parse_team(value: Any) -> Team:
    """Convert a team code or name ("A", "decepticons", ...) to a Team.

    Raises:
        ValueError: If value names no team
    """
    if isinstance(value, Team):
        return value
    try:
        return _TEAM_ALIASES[str(value).strip().lower()]
    except KeyError:
        raise ValueError(f"Unknown team: {value!r}")
