"""
Areas — Serializers

Read serializers for each area type, plus the request serializers that
validate query strings and path codes before any query runs.

@file areas/serializers.py
"""

import re

from rest_framework import serializers

from core.sorting import SortOptions, SortOrder

from .models import District, Island, Province, Regency
from .services import DISTRICT_SORT_KEYS, ISLAND_SORT_KEYS, PROVINCE_SORT_KEYS, REGENCY_SORT_KEYS

SYMBOL_RE = re.compile(r'[!@#$%^&*_+=\[\]{};:"\\|<>?~`]')


# ---------------------------------------------------------------------------
# Read serializers
# ---------------------------------------------------------------------------

class ProvinceSerializer(serializers.ModelSerializer):
    class Meta:
        model = Province
        fields = ['code', 'name']
        read_only_fields = fields


class RegencySerializer(serializers.ModelSerializer):
    province_code = serializers.CharField(source='province_id', read_only=True)

    class Meta:
        model = Regency
        fields = ['code', 'name', 'province_code']
        read_only_fields = fields


class DistrictSerializer(serializers.ModelSerializer):
    regency_code = serializers.CharField(source='regency_id', read_only=True)

    class Meta:
        model = District
        fields = ['code', 'name', 'regency_code']
        read_only_fields = fields


class IslandSerializer(serializers.ModelSerializer):
    """Island with the decimal coordinates attached by the island finder."""

    regency_code = serializers.CharField(source='regency_id', read_only=True, allow_null=True)
    latitude = serializers.FloatField(read_only=True)
    longitude = serializers.FloatField(read_only=True)

    class Meta:
        model = Island
        fields = [
            'code', 'name', 'coordinate',
            'is_outermost_small', 'is_populated',
            'regency_code', 'latitude', 'longitude',
        ]
        read_only_fields = fields


# ---------------------------------------------------------------------------
# Request serializers
# ---------------------------------------------------------------------------

class AreaQuerySerializer(serializers.Serializer):
    """
    Query string of a list endpoint: ``name``, ``sort_by``, ``sort_order``.

    Subclasses set ``sort_keys`` to the entity's sortable fields.
    """

    sort_keys: tuple = ()

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    sort_order = serializers.ChoiceField(choices=SortOrder.choices, required=False)

    def get_fields(self):
        fields = super().get_fields()
        fields['sort_by'] = serializers.ChoiceField(choices=self.sort_keys, required=False)
        return fields

    def validate_name(self, value):
        value = value.strip()
        if not value:
            return ''
        if len(value) < 3:
            raise serializers.ValidationError('Ensure this field has at least 3 characters.')
        if SYMBOL_RE.search(value):
            raise serializers.ValidationError('This field must not contain symbols.')
        return value

    @property
    def sort(self) -> SortOptions:
        data = self.validated_data
        return SortOptions(sort_by=data.get('sort_by'), sort_order=data.get('sort_order'))


class ProvinceQuerySerializer(AreaQuerySerializer):
    sort_keys = PROVINCE_SORT_KEYS


class RegencyQuerySerializer(AreaQuerySerializer):
    sort_keys = REGENCY_SORT_KEYS


class DistrictQuerySerializer(AreaQuerySerializer):
    sort_keys = DISTRICT_SORT_KEYS


class IslandQuerySerializer(AreaQuerySerializer):
    sort_keys = ISLAND_SORT_KEYS


class AreaCodeSerializer(serializers.Serializer):
    """Path code of a detail endpoint; the exact length comes from context."""

    code = serializers.CharField()

    def validate_code(self, value):
        length = self.context['code_length']
        if not value.isalnum() or not value.isascii():
            raise serializers.ValidationError('Code must be alphanumeric.')
        if len(value) != length:
            raise serializers.ValidationError(f'Code must be exactly {length} characters long.')
        return value
