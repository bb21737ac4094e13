"""
Core — Sort Resolution

Turns a requested ``sort_by`` / ``sort_order`` pair into a single-key
ordering directive the ORM can consume. Every list endpoint goes through
a ``Sorter`` bound to its entity's allow-list and default.

Resolution never fails: anything missing or outside the allow-list
degrades to the default. Rejecting bad input with a 400 is the job of
the request serializers, which run first.

@file core/sorting.py
"""

from dataclasses import dataclass
from typing import Iterable, Mapping

from django.db import models


class SortOrder(models.TextChoices):
    ASC = 'asc', 'Ascending'
    DESC = 'desc', 'Descending'


@dataclass(frozen=True)
class SortOptions:
    """A requested (or default) sort; either part may be missing."""

    sort_by: str | None = None
    sort_order: str | None = None


@dataclass(frozen=True)
class OrderDirective:
    """A resolved ``(field, direction)`` pair."""

    field: str
    direction: str = SortOrder.ASC

    def as_order_by(self) -> str:
        """Return the ``order_by()`` argument, e.g. ``'name'`` or ``'-name'``."""
        if self.direction == SortOrder.DESC:
            return f'-{self.field}'
        return self.field


def _coerce(requested) -> SortOptions:
    if requested is None:
        return SortOptions()
    if isinstance(requested, SortOptions):
        return requested
    if isinstance(requested, Mapping):
        return SortOptions(
            sort_by=requested.get('sort_by'),
            sort_order=requested.get('sort_order'),
        )
    return SortOptions()


def resolve_sort(requested, default: SortOptions, allowed_keys: Iterable[str]) -> OrderDirective:
    """
    Resolve ``requested`` against ``default`` and ``allowed_keys``.

    ``requested`` may be a ``SortOptions``, a mapping with ``sort_by`` /
    ``sort_order`` keys, or ``None``.
    """
    requested = _coerce(requested)
    allowed = set(allowed_keys)

    sort_by, sort_order = requested.sort_by, requested.sort_order

    field = sort_by if isinstance(sort_by, str) and sort_by in allowed else default.sort_by
    direction = (
        sort_order
        if isinstance(sort_order, str) and sort_order in SortOrder.values
        else default.sort_order
    )
    return OrderDirective(field=field, direction=str(direction))


class Sorter:
    """Sort resolver bound to one entity's allow-list and default."""

    def __init__(self, allowed_keys: Iterable[str], sort_by: str, sort_order: str = SortOrder.ASC):
        self.allowed_keys = frozenset(allowed_keys)
        if sort_by not in self.allowed_keys:
            raise ValueError(f'Default sort key {sort_by!r} is not in the allowed keys.')
        if sort_order not in SortOrder.values:
            raise ValueError(f'Default sort order {sort_order!r} must be one of {SortOrder.values}.')
        self.default = SortOptions(sort_by=sort_by, sort_order=sort_order)

    def __repr__(self):
        return (
            f'Sorter(allowed_keys={sorted(self.allowed_keys)}, '
            f'default={self.default.sort_by} {self.default.sort_order})'
        )

    def resolve(self, sort=None) -> OrderDirective:
        return resolve_sort(sort, self.default, self.allowed_keys)

    def order_by(self, sort=None) -> str:
        return self.resolve(sort).as_order_by()
