"""
Core — Database Provider Features

Capability flags per database vendor. Finders query these to decide how
to express case-insensitive name filtering.

Projects can override any flag through the ``DATABASE_PROVIDER_FEATURES``
setting, keyed by ``connection.vendor``.

Stores without native case-insensitive matching fall back to
``UnicodeLower`` on both sides of the comparison. SQLite's own ``LOWER()``
folds ASCII only, so ``register_sqlite_functions`` installs a Python
``str.lower`` on every new SQLite connection and ``UnicodeLower`` calls it
there.

@file core/database.py
"""

import copy

from django.conf import settings
from django.db import DEFAULT_DB_ALIAS, connections
from django.db.models.functions import Lower

PROVIDER_FEATURES = {
    'postgresql': {'filtering': {'insensitive': True}},
    'mysql': {'filtering': {'insensitive': True}},
    'oracle': {'filtering': {'insensitive': True}},
    # LIKE and LOWER() on SQLite fold ASCII only.
    'sqlite': {'filtering': {'insensitive': False}},
}

SQLITE_UNICODE_LOWER = 'IDN_UNICODE_LOWER'


def get_db_provider_features(using: str = DEFAULT_DB_ALIAS) -> dict:
    vendor = connections[using].vendor
    features = copy.deepcopy(PROVIDER_FEATURES.get(vendor, {'filtering': {'insensitive': False}}))

    overrides = getattr(settings, 'DATABASE_PROVIDER_FEATURES', {}).get(vendor, {})
    for group, flags in overrides.items():
        features.setdefault(group, {}).update(flags)
    return features


def supports_insensitive_filtering(using: str = DEFAULT_DB_ALIAS) -> bool:
    return bool(get_db_provider_features(using).get('filtering', {}).get('insensitive'))


def _unicode_lower(value):
    if isinstance(value, str):
        return value.lower()
    return value


def register_sqlite_functions(sender, connection, **kwargs):
    """``connection_created`` receiver: add SQL functions SQLite lacks."""
    if connection.vendor != 'sqlite':
        return
    connection.connection.create_function(
        SQLITE_UNICODE_LOWER, 1, _unicode_lower, deterministic=True,
    )


class UnicodeLower(Lower):
    """``LOWER()`` that folds non-ASCII letters on every backend."""

    def as_sqlite(self, compiler, connection, **extra_context):
        return super().as_sql(
            compiler, connection, function=SQLITE_UNICODE_LOWER, **extra_context,
        )
