"""
Areas — Model Tests

Tests for the code-prefix constraints that encode the hierarchy.

@file areas/tests/test_models.py
"""

import pytest
from django.db import IntegrityError

from areas.models import District, Island, Regency
from tests.factories import DistrictFactory, IslandFactory, ProvinceFactory, RegencyFactory


@pytest.mark.django_db
class TestAreaHierarchy:
    def test_regency_code_starts_with_province_code(self):
        regency = RegencyFactory()
        assert regency.code.startswith(regency.province.code)
        assert regency.province_code == regency.province.code

    def test_district_and_island_codes_extend_regency_code(self):
        regency = RegencyFactory()
        district = DistrictFactory(regency=regency)
        island = IslandFactory(regency=regency)
        assert district.code[:4] == regency.code
        assert island.code[:4] == regency.code
        assert len(island.code) == 9

    def test_regency_with_foreign_prefix_is_rejected(self):
        ProvinceFactory(code='32')
        with pytest.raises(IntegrityError):
            Regency.objects.create(code='3301', name='Wrong Prefix', province_id='32')

    def test_district_with_foreign_prefix_is_rejected(self):
        regency = RegencyFactory()
        with pytest.raises(IntegrityError):
            District.objects.create(code='999999', name='Wrong Prefix', regency=regency)

    def test_island_with_foreign_prefix_is_rejected(self):
        regency = RegencyFactory()
        with pytest.raises(IntegrityError):
            Island.objects.create(
                code='999940001', name='Wrong Prefix',
                coordinate='01°10\'00.00" N 123°26\'00.00" E', regency=regency,
            )

    def test_island_without_regency_is_allowed(self):
        island = IslandFactory(regency=None)
        assert island.regency_code is None
        assert island.code.startswith('ZZZZ')
