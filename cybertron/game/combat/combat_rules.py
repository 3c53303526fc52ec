"""
Combat rule configuration.

The thresholds that let a single stat decide a fight, and the names that
make a transformer legendary, live here so they can be loaded from YAML
rather than hard-coded in the resolver.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..entities.transformer import LEGENDARY_NAMES, Transformer

DEFAULT_RULES_PATH = "assets/config/combat_rules.yaml"


@dataclass(frozen=True)
class CombatRules:
    """Thresholds and legendary names used to resolve a fight."""
    legendary_names: tuple[str, ...] = LEGENDARY_NAMES
    courage_threshold: int = 4
    strength_threshold: int = 3
    skill_threshold: int = 3

    def __post_init__(self):
        for name in ("courage_threshold", "strength_threshold", "skill_threshold"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must not be negative, got {value}")

    def is_legendary(self, transformer: Transformer) -> bool:
        return any(transformer.has_matching_name(name) for name in self.legendary_names)


DEFAULT_RULES = CombatRules()


def _resolve_path(config_path: str) -> Path:
    """Resolve relative paths against the project root."""
    if os.path.isabs(config_path):
        return Path(config_path)
    if os.path.exists(config_path):
        return Path(config_path)
    project_root = Path(__file__).parent.parent.parent.parent
    return project_root / config_path


def parse_combat_rules(data: Optional[dict[str, Any]]) -> CombatRules:
    """Build CombatRules from a decoded config mapping.

    Keys missing from the `combat_rules` section keep their defaults.

    Raises:
        ValueError: If the section or one of its values is malformed
    """
    if not data:
        return DEFAULT_RULES
    if not isinstance(data, dict):
        raise ValueError(f"Combat rules config must be a mapping, got {type(data).__name__}")

    section = data.get("combat_rules", {}) or {}
    if not isinstance(section, dict):
        raise ValueError("'combat_rules' section must be a mapping")

    try:
        names = section.get("legendary_names", DEFAULT_RULES.legendary_names)
        if isinstance(names, str):
            names = [names]
        return CombatRules(
            legendary_names=tuple(str(name) for name in names),
            courage_threshold=int(section.get("courage_threshold", DEFAULT_RULES.courage_threshold)),
            strength_threshold=int(section.get("strength_threshold", DEFAULT_RULES.strength_threshold)),
            skill_threshold=int(section.get("skill_threshold", DEFAULT_RULES.skill_threshold)),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid combat rules: {e}")


def load_combat_rules(config_path: str = DEFAULT_RULES_PATH) -> CombatRules:
    """Load combat rules from a YAML file.

    Args:
        config_path: Absolute path, or path relative to the project root

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file cannot be parsed
    """
    config_file = _resolve_path(config_path)
    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Combat rules file not found: {config_file}")
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse combat rules YAML: {e}")

    return parse_combat_rules(data)
