"""Ordering of transformer lists.

Listing screens and battle seeding share the same comparator so that the
order a roster is displayed in is the order it fights in. Criteria are
applied in turn; when all of them compare equal the id decides, with
persisted transformers ahead of unsaved ones.
"""

from functools import cmp_to_key
from typing import Callable, Iterable, Sequence

from ...core.data import SortCriterion, Team
from .transformer import Transformer

SEEDING_CRITERIA: tuple[SortCriterion, ...] = (SortCriterion.RANK_DESCENDING, SortCriterion.NAME)

_TEAM_ORDER = {Team.AUTOBOTS: 0, Team.DECEPTICONS: 1}

_DESCENDING = {
    SortCriterion.NAME_DESCENDING: SortCriterion.NAME,
    SortCriterion.TEAM_DESCENDING: SortCriterion.TEAM,
    SortCriterion.RANK_DESCENDING: SortCriterion.RANK,
    SortCriterion.RATING_DESCENDING: SortCriterion.RATING,
}

_SORT_KEYS: dict[SortCriterion, Callable[[Transformer], object]] = {
    SortCriterion.NAME: lambda t: t.name,
    SortCriterion.TEAM: lambda t: _TEAM_ORDER[t.team],
    SortCriterion.RANK: lambda t: t.rank,
    SortCriterion.RATING: lambda t: t.rating,
}


def _cmp(lhs, rhs) -> int:
    return (lhs > rhs) - (lhs < rhs)


def _compare_ids(lhs: Transformer, rhs: Transformer) -> int:
    if lhs.id is not None and rhs.id is None:
        return -1
    if lhs.id is None and rhs.id is not None:
        return 1
    if lhs.id is None or lhs.id == rhs.id:
        return 0
    return _cmp(lhs.id, rhs.id)


def compare_with_criteria(
    criteria: Sequence[SortCriterion], lhs: Transformer, rhs: Transformer
) -> int:
    """Three-way compare two transformers.

    Returns:
        -1 if lhs orders first, 1 if rhs orders first, 0 if they are equal
    """
    for criterion in criteria:
        base = _DESCENDING.get(criterion, criterion)
        key = _SORT_KEYS[base]
        comparison = _cmp(key(lhs), key(rhs))
        if comparison != 0:
            return -comparison if base is not criterion else comparison

    return _compare_ids(lhs, rhs)


def order_with_criteria(criteria: Sequence[SortCriterion], ascending: bool = True):
    """Build a `key` for `sorted()` that applies the given criteria."""
    criteria = tuple(criteria)
    if ascending:
        return cmp_to_key(lambda lhs, rhs: compare_with_criteria(criteria, lhs, rhs))
    return cmp_to_key(lambda lhs, rhs: compare_with_criteria(criteria, rhs, lhs))


def sort_transformers(
    transformers: Iterable[Transformer],
    criteria: Sequence[SortCriterion],
    ascending: bool = True,
) -> list[Transformer]:
    """Sort a roster for display, falling back to name order.

    NAME is appended when no name criterion is given so that equal ranks or
    ratings still list alphabetically.
    """
    criteria = list(criteria)
    if SortCriterion.NAME not in criteria and SortCriterion.NAME_DESCENDING not in criteria:
        criteria.append(SortCriterion.NAME)
    return sorted(transformers, key=order_with_criteria(criteria, ascending))


def seed_order(transformers: Iterable[Transformer]) -> list[Transformer]:
    """Fight order for one team: rank descending, then name, then id."""
    return sorted(transformers, key=order_with_criteria(SEEDING_CRITERIA))
