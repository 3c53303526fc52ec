"""Battle entities.

- transformer.py: The Transformer value type and team parsing
- sorting.py: Criteria-based ordering shared by listings and battle seeding
"""

from .transformer import Transformer, LEGENDARY_NAMES, parse_team
from .sorting import (
    SEEDING_CRITERIA,
    compare_with_criteria,
    order_with_criteria,
    sort_transformers,
    seed_order,
)

__all__ = [
    "Transformer",
    "LEGENDARY_NAMES",
    "parse_team",
    "SEEDING_CRITERIA",
    "compare_with_criteria",
    "order_with_criteria",
    "sort_transformers",
    "seed_order",
]
