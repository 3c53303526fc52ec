"""Roster loading and saving.

Rosters are YAML files with a top-level `transformers` list. JSON files in
the remote record layout (`{"transformers": [...]}`, team as "A"/"D") are
read as well.
"""
import json
from pathlib import Path
from typing import Any, Iterable, Union

import yaml

from .entities.transformer import Transformer


class RosterLoader:
    """Handles loading rosters from YAML or JSON files."""

    @staticmethod
    def load_from_file(file_path: Union[str, Path]) -> list[Transformer]:
        """Load a roster file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file cannot be parsed or a record is invalid
        """
        path_obj = Path(file_path)

        try:
            with open(path_obj, 'r', encoding='utf-8') as f:
                if path_obj.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Roster file not found: {file_path}")
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to parse roster {path_obj.name}: {e}")

        return RosterLoader.parse_roster(data)

    @staticmethod
    def parse_roster(data: Any) -> list[Transformer]:
        """Parse decoded roster data.

        Accepts either a mapping with a `transformers` list or the list itself.
        """
        if data is None:
            return []
        if isinstance(data, dict):
            records = data.get("transformers", [])
        else:
            records = data
        if not isinstance(records, list):
            raise ValueError("Roster 'transformers' must be a list")

        transformers = []
        for index, record in enumerate(records):
            if not isinstance(record, dict):
                raise ValueError(f"Roster entry {index} must be a mapping, got {type(record).__name__}")
            try:
                transformers.append(Transformer.from_dict(record))
            except ValueError as e:
                raise ValueError(f"Roster entry {index}: {e}")
        return transformers

    @staticmethod
    def save_to_file(transformers: Iterable[Transformer], file_path: Union[str, Path]) -> None:
        """Write a roster as YAML."""
        data = {"transformers": [t.to_dict() for t in transformers]}
        with open(file_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, sort_keys=False)
