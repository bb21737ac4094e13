"""
idn-area — Test Factories

Factory Boy factories for area rows, plus ``seed_hierarchy`` which loads a
small, realistic slice of the national dataset. Used across all test
modules.

Factory codes use letters for the province part so they never collide
with the numeric codes of the seeded slice.

@file tests/factories.py
"""

from types import SimpleNamespace

import factory

from areas.models import District, Island, Province, Regency


def _letter_code(n):
    return f'{chr(65 + n // 26 % 26)}{chr(65 + n % 26)}'


class ProvinceFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Province
        django_get_or_create = ('code',)

    code = factory.Sequence(_letter_code)
    name = factory.Sequence(lambda n: f'Province-{n}')


class RegencyFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Regency

    province = factory.SubFactory(ProvinceFactory)
    code = factory.LazyAttributeSequence(lambda o, n: f'{o.province.code}{n % 100:02d}')
    name = factory.Sequence(lambda n: f'Regency-{n}')


class DistrictFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = District

    regency = factory.SubFactory(RegencyFactory)
    code = factory.LazyAttributeSequence(lambda o, n: f'{o.regency.code}{n % 100:02d}')
    name = factory.Sequence(lambda n: f'District-{n}')


class IslandFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Island

    regency = factory.SubFactory(RegencyFactory)
    code = factory.LazyAttributeSequence(
        lambda o, n: f'{o.regency.code if o.regency else "ZZZZ"}{n % 100000:05d}',
    )
    name = factory.Sequence(lambda n: f'Pulau-{n}')
    coordinate = '01°10\'00.00" N 123°26\'00.00" E'
    is_outermost_small = False
    is_populated = True


# ---------------------------------------------------------------------------
# Seeded slice
# ---------------------------------------------------------------------------

PROVINCES = [
    ('11', 'ACEH'),
    ('31', 'DKI JAKARTA'),
    ('32', 'JAWA BARAT'),
    ('33', 'Jawa Tengah'),
    ('71', 'SULAWESI UTARA'),
]

REGENCIES = [
    ('1101', 'KABUPATEN SIMEULUE', '11'),
    ('1171', 'KOTA BANDA ACEH', '11'),
    ('3171', 'KOTA ADMINISTRASI JAKARTA SELATAN', '31'),
    ('3201', 'KABUPATEN BOGOR', '32'),
    ('3204', 'KABUPATEN BANDUNG', '32'),
    ('3273', 'Kota Bandung', '32'),
    ('3374', 'KOTA SEMARANG', '33'),
    ('7106', 'KABUPATEN MINAHASA UTARA', '71'),
]

DISTRICTS = [
    ('110101', 'Teupah Selatan', '1101'),
    ('110102', 'Simeulue Timur', '1101'),
    ('110103', 'Teupah Barat', '1101'),
    ('327301', 'Sukasari', '3273'),
    ('327302', 'Coblong', '3273'),
    ('320101', 'Cibinong', '3201'),
]

ISLANDS = [
    # code, name, coordinate, is_outermost_small, is_populated, regency
    ('110140001', 'Pulau Batee', '02°52\'54.99" N 095°23\'35.69" E', False, False, '1101'),
    ('110140002', 'Pulau Asu', '02°25\'30.00" N 096°03\'00.00" E', False, True, '1101'),
    ('110140003', 'Pulau Simeulue Cut', '02°18\'40.00" N 096°25\'10.00" E', True, False, '1101'),
    ('710640001', 'Pulau Bangka', '01°45\'00.00" N 125°08\'00.00" E', False, True, '7106'),
    ('710640002', 'Pulau Talise', '01°50\'10.00" N 125°03\'20.00" E', False, True, '7106'),
    ('000040001', 'Pulau Tanpa Kabupaten', '06°06\'00.00" S 106°49\'00.00" E', False, False, None),
]


def seed_hierarchy():
    """Create the slice above and return the created rows by type."""
    provinces = Province.objects.bulk_create(
        [Province(code=code, name=name) for code, name in PROVINCES],
    )
    regencies = Regency.objects.bulk_create(
        [Regency(code=code, name=name, province_id=parent) for code, name, parent in REGENCIES],
    )
    districts = District.objects.bulk_create(
        [District(code=code, name=name, regency_id=parent) for code, name, parent in DISTRICTS],
    )
    islands = Island.objects.bulk_create([
        Island(
            code=code, name=name, coordinate=coordinate,
            is_outermost_small=outermost, is_populated=populated,
            regency_id=parent,
        )
        for code, name, coordinate, outermost, populated, parent in ISLANDS
    ])
    return SimpleNamespace(
        provinces=provinces,
        regencies=regencies,
        districts=districts,
        islands=islands,
    )
