"""Stat definitions and numpy-backed roster statistics.

Transformers carry seven integer stats. `StatArray` packs a roster into a
single matrix so that team-wide figures (ratings, totals, means) are
computed with vectorised operations instead of per-unit loops.
"""

from typing import TYPE_CHECKING, Iterable, Optional

import numpy as np
from numpy.typing import NDArray

if TYPE_CHECKING:
    from ...game.entities.transformer import Transformer


STAT_NAMES: tuple[str, ...] = (
    "strength",
    "intelligence",
    "speed",
    "endurance",
    "courage",
    "firepower",
    "skill",
)

# Courage and skill are deliberately left out of the rating
RATING_STATS: tuple[str, ...] = (
    "strength",
    "intelligence",
    "speed",
    "endurance",
    "firepower",
)

_RATING_COLUMNS = [STAT_NAMES.index(name) for name in RATING_STATS]


class StatArray:
    """Matrix of stats with one row per transformer and one column per stat.

    Row order follows the order of the roster it was built from.
    """

    def __init__(self, transformers: Optional[Iterable["Transformer"]] = None):
        """Initialize StatArray from a roster.

        Args:
            transformers: Transformers to pack. If None, creates an empty StatArray.
        """
        rows = [[getattr(t, stat) for stat in STAT_NAMES] for t in (transformers or [])]
        if rows:
            self._data = np.array(rows, dtype=np.int64)
        else:
            self._data = np.empty((0, len(STAT_NAMES)), dtype=np.int64)

    @property
    def data(self) -> NDArray[np.int64]:
        """Get the underlying (N, 7) numpy array."""
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def column(self, stat: str) -> NDArray[np.int64]:
        """Get one stat for every transformer.

        Raises:
            KeyError: If stat is not one of STAT_NAMES
        """
        if stat not in STAT_NAMES:
            raise KeyError(f"Unknown stat: {stat}")
        return self._data[:, STAT_NAMES.index(stat)]

    def ratings(self) -> NDArray[np.int64]:
        """Rating of every transformer."""
        return self._data[:, _RATING_COLUMNS].sum(axis=1)

    def total_rating(self) -> int:
        return int(self.ratings().sum())

    def mean_rating(self) -> float:
        """Average rating, 0.0 for an empty roster."""
        if len(self._data) == 0:
            return 0.0
        return float(self.ratings().mean())

    def stat_totals(self) -> dict[str, int]:
        """Sum of each stat across the roster."""
        totals = self._data.sum(axis=0)
        return {stat: int(totals[i]) for i, stat in enumerate(STAT_NAMES)}
