"""
Areas — Finders

One generic finder per area type. A finder wraps a model manager (the
persistence handle), a ``Sorter`` and an optional per-row transform, and
answers name-filtered listings and exact code lookups.

Traversal helpers (``require_parent`` / ``find_children``) check that a
parent code exists before its children are queried.

@file areas/finders.py
"""

import logging
from typing import Any, Callable, Mapping

from core.coordinates import CoordinateConverter
from core.database import UnicodeLower, supports_insensitive_filtering
from core.exceptions import AreaNotFoundError
from core.sorting import Sorter

logger = logging.getLogger('idn_area')


class AreaFinder:
    """Read access to one area table."""

    def __init__(
        self,
        manager,
        *,
        entity: str,
        sorter: Sorter,
        transform: Callable[[Any], Any] | None = None,
    ):
        self.manager = manager
        self.entity = entity
        self.sorter = sorter
        self.transform = transform

    def __repr__(self):
        return f'<AreaFinder {self.entity}>'

    @property
    def using(self) -> str:
        return self.manager.db

    def _filter_by_name(self, queryset, name: str):
        if not name:
            return queryset
        if supports_insensitive_filtering(self.using):
            return queryset.filter(name__icontains=name)
        return queryset.annotate(name_lower=UnicodeLower('name')).filter(
            name_lower__contains=name.lower(),
        )

    def _finalize(self, instance):
        if self.transform is None:
            return instance
        return self.transform(instance)

    def find(self, name: str = '', sort=None, filters: Mapping[str, Any] | None = None) -> list:
        """
        Rows whose name contains ``name`` (case-insensitively), ordered by
        the resolved sort. ``filters`` adds equality conditions.
        """
        directive = self.sorter.resolve(sort)
        queryset = self.manager.all()
        if filters:
            queryset = queryset.filter(**filters)
        queryset = self._filter_by_name(queryset, name or '')
        queryset = queryset.order_by(directive.as_order_by())

        logger.debug(
            'Finding %s name=%r filters=%r order=%s',
            self.entity, name, dict(filters or {}), directive.as_order_by(),
        )
        return [self._finalize(row) for row in queryset]

    def find_by_code(self, code: str):
        """Return the row with ``code``, or ``None``."""
        try:
            instance = self.manager.get(pk=code)
        except self.manager.model.DoesNotExist:
            return None
        return self._finalize(instance)


def add_decimal_coordinate(island):
    """Attach decimal ``latitude`` / ``longitude`` parsed from ``coordinate``."""
    island.latitude, island.longitude = CoordinateConverter().convert_to_number(island.coordinate)
    return island


def require_parent(parent_finder: AreaFinder, parent_code: str):
    """Return the parent row, or raise ``AreaNotFoundError``."""
    parent = parent_finder.find_by_code(parent_code)
    if parent is None:
        raise AreaNotFoundError(parent_finder.entity, parent_code)
    return parent


def find_children(
    parent_finder: AreaFinder,
    parent_code: str,
    child_finder: AreaFinder,
    foreign_key: str,
    name: str = '',
    sort=None,
) -> list:
    require_parent(parent_finder, parent_code)
    return child_finder.find(name, sort, filters={foreign_key: parent_code})
