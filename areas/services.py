"""
Areas — Service Layer

Query helpers for the administrative hierarchy. Services are thin: each
one delegates to the finders held by an ``AreaRepository`` and adds the
traversal queries for its area type.

@file areas/services.py
"""

from django.apps import apps
from django.db import DEFAULT_DB_ALIAS

from core.exceptions import AreaNotFoundError
from core.sorting import Sorter, SortOrder

from .finders import AreaFinder, add_decimal_coordinate, find_children
from .models import District, Island, Province, Regency

PROVINCE_SORT_KEYS = ('code', 'name')
REGENCY_SORT_KEYS = ('code', 'name')
DISTRICT_SORT_KEYS = ('code', 'name')
ISLAND_SORT_KEYS = ('code', 'name', 'coordinate')


class AreaRepository:
    """Finders for every area type, bound to one database alias."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS):
        self.using = using
        self.provinces = AreaFinder(
            Province.objects.db_manager(using),
            entity='province',
            sorter=Sorter(PROVINCE_SORT_KEYS, 'code', SortOrder.ASC),
        )
        self.regencies = AreaFinder(
            Regency.objects.db_manager(using),
            entity='regency',
            sorter=Sorter(REGENCY_SORT_KEYS, 'code', SortOrder.ASC),
        )
        self.districts = AreaFinder(
            District.objects.db_manager(using),
            entity='district',
            sorter=Sorter(DISTRICT_SORT_KEYS, 'code', SortOrder.ASC),
        )
        self.islands = AreaFinder(
            Island.objects.db_manager(using),
            entity='island',
            sorter=Sorter(ISLAND_SORT_KEYS, 'code', SortOrder.ASC),
            transform=add_decimal_coordinate,
        )


def get_area_repository() -> AreaRepository:
    """The repository built when the ``areas`` app became ready."""
    return apps.get_app_config('areas').repository


class AreaService:
    """Listing and lookup shared by every area type."""

    finder_name: str = ''

    def __init__(self, repository: AreaRepository | None = None):
        self.repository = repository or get_area_repository()

    @property
    def finder(self) -> AreaFinder:
        return getattr(self.repository, self.finder_name)

    def find(self, name: str = '', sort=None) -> list:
        return self.finder.find(name, sort)

    def find_by_code(self, code: str):
        return self.finder.find_by_code(code)

    def get(self, code: str):
        area = self.finder.find_by_code(code)
        if area is None:
            raise AreaNotFoundError(self.finder.entity, code)
        return area


class ProvinceService(AreaService):
    finder_name = 'provinces'

    def find_regencies(self, code: str, name: str = '', sort=None) -> list:
        return find_children(
            self.repository.provinces, code,
            self.repository.regencies, 'province_id',
            name=name, sort=sort,
        )


class RegencyService(AreaService):
    finder_name = 'regencies'

    def find_districts(self, code: str, name: str = '', sort=None) -> list:
        return find_children(
            self.repository.regencies, code,
            self.repository.districts, 'regency_id',
            name=name, sort=sort,
        )

    def find_islands(self, code: str, name: str = '', sort=None) -> list:
        return find_children(
            self.repository.regencies, code,
            self.repository.islands, 'regency_id',
            name=name, sort=sort,
        )


class DistrictService(AreaService):
    finder_name = 'districts'


class IslandService(AreaService):
    finder_name = 'islands'
