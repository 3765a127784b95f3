from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion

import apps.tones.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Tone',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100)),
                ('stages', models.JSONField(default=apps.tones.models.default_stages, help_text='Dokładnie 4 etykiety kolumn tablicy')),
                ('deadline', models.CharField(choices=[('off', 'No deadlines'), ('soft', 'Soft deadlines'), ('hard', 'Hard deadlines')], default='soft', max_length=10)),
                ('is_global', models.BooleanField(default=False)),
                ('greeting', models.CharField(blank=True, max_length=200)),
                ('unmet_behavior', models.CharField(choices=[('nothing', 'Do nothing'), ('archive', 'Move to the overflow stage'), ('delete', 'Delete the goal')], default='nothing', max_length=10)),
                ('user', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='tones', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
