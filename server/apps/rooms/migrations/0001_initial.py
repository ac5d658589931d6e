import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Room',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(blank=True, default='', max_length=255)),
                ('description', models.TextField(blank=True, default='')),
                ('number', models.CharField(blank=True, default='', help_text='Room number as printed on the door', max_length=50)),
                ('location', models.CharField(blank=True, default='', max_length=255)),
                ('capacity', models.PositiveIntegerField(default=0, help_text='Number of seats')),
                ('room_type', models.CharField(blank=True, db_column='type', default='', help_text='Free-form room category (e.g. meeting, classroom)', max_length=100)),
                ('metadata', models.JSONField(blank=True, default=dict, help_text='Arbitrary extra attributes')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
            ],
            options={
                'verbose_name': 'Room',
                'verbose_name_plural': 'Rooms',
                'db_table': 'rooms',
                'ordering': ['name'],
            },
        ),
    ]
