"""
Areas — Models

Indonesia's administrative hierarchy as read-only reference data:
Province → Regency → District, plus Islands attached to regencies.

Every child code is its parent's code followed by a fixed-width suffix
(``32`` → ``3273`` → ``327301``). The prefix rule is enforced with a
CheckConstraint at the DB level.

@file areas/models.py
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Province(models.Model):
    code = models.CharField(_('code'), max_length=2, primary_key=True)
    name = models.CharField(_('name'), max_length=255, db_index=True)

    class Meta:
        verbose_name = _('province')
        verbose_name_plural = _('provinces')
        ordering = ['code']

    def __str__(self):
        return f'{self.name} ({self.code})'


class Regency(models.Model):
    code = models.CharField(_('code'), max_length=4, primary_key=True)
    name = models.CharField(_('name'), max_length=255, db_index=True)
    province = models.ForeignKey(
        Province,
        on_delete=models.PROTECT,
        related_name='regencies',
        db_column='province_code',
        verbose_name=_('province'),
    )

    class Meta:
        verbose_name = _('regency')
        verbose_name_plural = _('regencies')
        ordering = ['code']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(code__startswith=models.F('province')),
                name='regency_code_has_province_prefix',
            ),
        ]

    def __str__(self):
        return f'{self.name} ({self.code})'

    @property
    def province_code(self) -> str:
        return self.province_id


class District(models.Model):
    code = models.CharField(_('code'), max_length=6, primary_key=True)
    name = models.CharField(_('name'), max_length=255, db_index=True)
    regency = models.ForeignKey(
        Regency,
        on_delete=models.PROTECT,
        related_name='districts',
        db_column='regency_code',
        verbose_name=_('regency'),
    )

    class Meta:
        verbose_name = _('district')
        verbose_name_plural = _('districts')
        ordering = ['code']
        constraints = [
            models.CheckConstraint(
                condition=models.Q(code__startswith=models.F('regency')),
                name='district_code_has_regency_prefix',
            ),
        ]

    def __str__(self):
        return f'{self.name} ({self.code})'

    @property
    def regency_code(self) -> str:
        return self.regency_id


class Island(models.Model):
    """
    An island registered in the national gazetteer.

    ``coordinate`` keeps the packed DMS text exactly as published; decimal
    latitude/longitude are derived on read by the island finder and are
    never stored.
    """

    code = models.CharField(_('code'), max_length=9, primary_key=True)
    name = models.CharField(_('name'), max_length=255, db_index=True)
    coordinate = models.CharField(_('coordinate'), max_length=50)
    is_outermost_small = models.BooleanField(_('outermost small island'), default=False)
    is_populated = models.BooleanField(_('populated'), default=False)
    regency = models.ForeignKey(
        Regency,
        null=True, blank=True,
        on_delete=models.PROTECT,
        related_name='islands',
        db_column='regency_code',
        verbose_name=_('regency'),
    )

    class Meta:
        verbose_name = _('island')
        verbose_name_plural = _('islands')
        ordering = ['code']
        constraints = [
            models.CheckConstraint(
                condition=(
                    models.Q(regency__isnull=True)
                    | models.Q(code__startswith=models.F('regency'))
                ),
                name='island_code_has_regency_prefix',
            ),
        ]

    def __str__(self):
        return f'{self.name} ({self.code})'

    @property
    def regency_code(self) -> str | None:
        return self.regency_id
