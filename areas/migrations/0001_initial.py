import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Province',
            fields=[
                ('code', models.CharField(max_length=2, primary_key=True, serialize=False, verbose_name='code')),
                ('name', models.CharField(db_index=True, max_length=255, verbose_name='name')),
            ],
            options={
                'verbose_name': 'province',
                'verbose_name_plural': 'provinces',
                'ordering': ['code'],
            },
        ),
        migrations.CreateModel(
            name='Regency',
            fields=[
                ('code', models.CharField(max_length=4, primary_key=True, serialize=False, verbose_name='code')),
                ('name', models.CharField(db_index=True, max_length=255, verbose_name='name')),
                ('province', models.ForeignKey(db_column='province_code', on_delete=django.db.models.deletion.PROTECT, related_name='regencies', to='areas.province', verbose_name='province')),
            ],
            options={
                'verbose_name': 'regency',
                'verbose_name_plural': 'regencies',
                'ordering': ['code'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('code__startswith', models.F('province'))),
                        name='regency_code_has_province_prefix',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='District',
            fields=[
                ('code', models.CharField(max_length=6, primary_key=True, serialize=False, verbose_name='code')),
                ('name', models.CharField(db_index=True, max_length=255, verbose_name='name')),
                ('regency', models.ForeignKey(db_column='regency_code', on_delete=django.db.models.deletion.PROTECT, related_name='districts', to='areas.regency', verbose_name='regency')),
            ],
            options={
                'verbose_name': 'district',
                'verbose_name_plural': 'districts',
                'ordering': ['code'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('code__startswith', models.F('regency'))),
                        name='district_code_has_regency_prefix',
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name='Island',
            fields=[
                ('code', models.CharField(max_length=9, primary_key=True, serialize=False, verbose_name='code')),
                ('name', models.CharField(db_index=True, max_length=255, verbose_name='name')),
                ('coordinate', models.CharField(max_length=50, verbose_name='coordinate')),
                ('is_outermost_small', models.BooleanField(default=False, verbose_name='outermost small island')),
                ('is_populated', models.BooleanField(default=False, verbose_name='populated')),
                ('regency', models.ForeignKey(blank=True, db_column='regency_code', null=True, on_delete=django.db.models.deletion.PROTECT, related_name='islands', to='areas.regency', verbose_name='regency')),
            ],
            options={
                'verbose_name': 'island',
                'verbose_name_plural': 'islands',
                'ordering': ['code'],
                'constraints': [
                    models.CheckConstraint(
                        condition=models.Q(('regency__isnull', True), ('code__startswith', models.F('regency')), _connector='OR'),
                        name='island_code_has_regency_prefix',
                    ),
                ],
            },
        ),
    ]
