"""
Areas — Management Command: seed_areas

Loads provinces, regencies, districts and islands from the idn-area-data
CSV files.

Usage::

    python manage.py seed_areas --dir ./data
    python manage.py seed_areas --url https://example.org/idn-area-data/data

Idempotent: safe to re-run (rows are upserted on ``code``).

@file areas/management/commands/seed_areas.py
"""

import csv
import io
import logging
import urllib.request
from collections import Counter
from pathlib import Path

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from areas.models import District, Island, Province, Regency
from core.coordinates import CoordinateConverter, CoordinateParseError

logger = logging.getLogger('idn_area')

BATCH_SIZE = 1000
TRUE_VALUES = {'1', 'true', 'yes'}


def normalize_code(value: str) -> str:
    """'11.01.02' → '110102'."""
    return value.strip().replace('.', '')


def parse_bool(value: str) -> bool:
    return value.strip().lower() in TRUE_VALUES


class Command(BaseCommand):
    help = 'Seed the Indonesian administrative areas from idn-area-data CSV files.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dir',
            type=str,
            help='Directory holding provinces.csv, regencies.csv, districts.csv and islands.csv.',
        )
        parser.add_argument(
            '--url',
            type=str,
            help='Base URL to download the CSV files from (overrides --dir).',
        )

    def handle(self, *args, **options):
        self.source_url = options.get('url')
        self.source_dir = Path(options.get('dir') or settings.AREA_DATA_DIR)

        self.stdout.write('Loading Indonesian administrative areas…')
        counter = Counter()

        with transaction.atomic():
            self._seed_provinces(counter)
            self._seed_regencies(counter)
            self._seed_districts(counter)
            self._seed_islands(counter)

        logger.info('Seeded areas: %s', dict(counter))
        self.stdout.write(self.style.SUCCESS(
            f'Done. Provinces: {counter["province"]}, Regencies: {counter["regency"]}, '
            f'Districts: {counter["district"]}, Islands: {counter["island"]}'
        ))

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    def _read_rows(self, filename):
        if self.source_url:
            url = f'{self.source_url.rstrip("/")}/{filename}'
            self.stdout.write(f'Downloading {url}')
            with urllib.request.urlopen(url) as resp:
                text = resp.read().decode('utf-8-sig')
        else:
            path = self.source_dir / filename
            if not path.exists():
                raise CommandError(f'Missing data file: {path}')
            text = path.read_text(encoding='utf-8-sig')

        return list(csv.DictReader(io.StringIO(text)))

    def _upsert(self, model, objs, update_fields, counter, key):
        model.objects.bulk_create(
            objs,
            batch_size=BATCH_SIZE,
            update_conflicts=True,
            unique_fields=['code'],
            update_fields=update_fields,
        )
        counter[key] += len(objs)
        self.stdout.write(f'  {model._meta.verbose_name_plural}: {len(objs)}')

    # ------------------------------------------------------------------
    # Entities
    # ------------------------------------------------------------------

    def _seed_provinces(self, counter):
        objs = [
            Province(code=normalize_code(row['code']), name=row['name'].strip())
            for row in self._read_rows('provinces.csv')
        ]
        self._upsert(Province, objs, ['name'], counter, 'province')

    def _seed_regencies(self, counter):
        objs = [
            Regency(
                code=normalize_code(row['code']),
                name=row['name'].strip(),
                province_id=normalize_code(row['province_code']),
            )
            for row in self._read_rows('regencies.csv')
        ]
        self._upsert(Regency, objs, ['name', 'province'], counter, 'regency')

    def _seed_districts(self, counter):
        objs = [
            District(
                code=normalize_code(row['code']),
                name=row['name'].strip(),
                regency_id=normalize_code(row['regency_code']),
            )
            for row in self._read_rows('districts.csv')
        ]
        self._upsert(District, objs, ['name', 'regency'], counter, 'district')

    def _seed_islands(self, counter):
        converter = CoordinateConverter()
        objs = []
        for row in self._read_rows('islands.csv'):
            code = normalize_code(row['code'])
            coordinate = row['coordinate'].strip()
            try:
                converter.convert_to_number(coordinate)
            except CoordinateParseError as e:
                raise CommandError(f'Island {code}: {e}') from e

            regency_code = normalize_code(row.get('regency_code') or '')
            objs.append(Island(
                code=code,
                name=row['name'].strip(),
                coordinate=coordinate,
                is_outermost_small=parse_bool(row.get('is_outermost_small', '')),
                is_populated=parse_bool(row.get('is_populated', '')),
                regency_id=regency_code or None,
            ))

        self._upsert(
            Island, objs,
            ['name', 'coordinate', 'is_outermost_small', 'is_populated', 'regency'],
            counter, 'island',
        )
