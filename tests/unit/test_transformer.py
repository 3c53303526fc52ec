"""
Unit tests for the Transformer entity.

Tests derived figures, naming helpers, copying, validation and the
remote record conversion.
"""
import pytest
from dataclasses import FrozenInstanceError

from cybertron.core.data import Team
from cybertron.game.entities import Transformer, parse_team


class TestDerivedValues:
    """Test values computed from stats and name."""

    def test_rating(self, autobot, decepticon):
        """Rating sums strength, intelligence, speed, endurance and firepower."""
        assert autobot.rating == 25
        assert decepticon.rating == 18

    def test_rating_ignores_courage_and_skill(self, autobot):
        """Courage and skill do not contribute to the rating."""
        boosted = autobot.copy(courage=100, skill=100)
        assert boosted.rating == autobot.rating

    def test_rating_follows_current_stats(self, autobot):
        """Rating is recomputed from the stats of each copy."""
        stronger = autobot.copy(strength=autobot.strength + 5)
        assert stronger.rating == autobot.rating + 5

    def test_ordinary_transformers_are_not_legendary(self, autobot, decepticon):
        assert not autobot.is_legendary
        assert not decepticon.is_legendary

    @pytest.mark.parametrize("name", ["Optimus Prime", "optimus prime", "OPTIMUS PRIME", "Predaking", "predaKING"])
    def test_legendary_names_match_case_insensitively(self, autobot, name):
        assert autobot.copy(name=name).is_legendary

    def test_partial_name_is_not_legendary(self, autobot):
        assert not autobot.copy(name="Optimus").is_legendary
        assert not autobot.copy(name="Optimus Prime II").is_legendary


class TestNaming:
    """Test team and name helpers."""

    def test_team_name(self, autobot, decepticon):
        assert autobot.team_name == "Autobots"
        assert decepticon.team_name == "Decepticons"

    def test_name_including_team(self, autobot, decepticon):
        assert autobot.name_including_team == "Autobot Dumbot"
        assert decepticon.name_including_team == "Decepticon Dumbicon"

    def test_matching_name(self, autobot):
        assert autobot.has_matching_name("dumbot")
        assert not autobot.has_matching_name("Banana")

    def test_matching_id(self, autobot):
        assert autobot.has_matching_id("abc")
        assert not autobot.has_matching_id("banana")


class TestCopying:
    """Test immutability and copies."""

    def test_transformer_is_immutable(self, autobot):
        with pytest.raises(FrozenInstanceError):
            autobot.strength = 10  # type: ignore[misc]

    def test_copy_drops_id_by_default(self, autobot):
        copy = autobot.copy()
        assert copy.id is None
        assert copy.name == autobot.name
        assert copy.stats == autobot.stats

    def test_copy_can_keep_id(self, autobot):
        assert autobot.copy(include_id=True).id == "abc"

    def test_copy_can_replace_id(self, autobot):
        assert autobot.copy(id="new").id == "new"

    def test_copy_changes_team(self, autobot):
        duplicate = autobot.copy(team=Team.DECEPTICONS)
        assert duplicate.team == Team.DECEPTICONS
        assert autobot.team == Team.AUTOBOTS


class TestValidation:
    """Test validation of battle readiness."""

    def test_valid_transformer(self, autobot):
        assert autobot.validate() == []

    def test_empty_name(self, autobot):
        assert autobot.copy(name="   ").validate() == ["name must not be empty"]

    def test_negative_values_reported(self, autobot):
        problems = autobot.copy(rank=-1, courage=-2).validate()

        assert "rank must not be negative (got -1)" in problems
        assert "courage must not be negative (got -2)" in problems
        assert len(problems) == 2


class TestRecordConversion:
    """Test conversion to and from the remote record layout."""

    def test_to_dict_uses_team_code(self, autobot):
        data = autobot.to_dict()

        assert data["team"] == "A"
        assert data["id"] == "abc"
        assert data["firepower"] == 11
        assert "team_icon" not in data

    def test_to_dict_without_id(self, autobot):
        assert "id" not in autobot.to_dict(include_id=False)

    def test_from_dict(self):
        record = {
            "id": "q1", "name": "Soundwave", "team": "D", "rank": 5,
            "strength": 8, "intelligence": 9, "speed": 2, "endurance": 6,
            "courage": 7, "firepower": 5, "skill": 10,
            "teamIcon": "https://example.com/d.svg",
        }
        transformer = Transformer.from_dict(record)

        assert transformer.team == Team.DECEPTICONS
        assert transformer.id == "q1"
        assert transformer.skill == 10
        assert transformer.team_icon == "https://example.com/d.svg"

    def test_from_dict_restores_to_dict(self, decepticon):
        assert Transformer.from_dict(decepticon.to_dict()) == decepticon

    def test_from_dict_missing_stat(self, autobot):
        record = autobot.to_dict()
        del record["skill"]

        with pytest.raises(ValueError, match="skill"):
            Transformer.from_dict(record)

    def test_from_dict_bad_stat(self, autobot):
        record = autobot.to_dict()
        record["speed"] = "fast"

        with pytest.raises(ValueError):
            Transformer.from_dict(record)


class TestParseTeam:
    """Test team code parsing."""

    @pytest.mark.parametrize("value,expected", [
        ("A", Team.AUTOBOTS),
        ("autobots", Team.AUTOBOTS),
        (" Autobot ", Team.AUTOBOTS),
        ("d", Team.DECEPTICONS),
        ("DECEPTICONS", Team.DECEPTICONS),
        (Team.DECEPTICONS, Team.DECEPTICONS),
    ])
    def test_known_values(self, value, expected):
        assert parse_team(value) == expected

    def test_unknown_value(self):
        with pytest.raises(ValueError, match="Unknown team"):
            parse_team("Maximals")

