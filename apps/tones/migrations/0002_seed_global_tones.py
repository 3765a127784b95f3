from django.db import migrations


GLOBAL_TONES = [
    {
        'name': 'Professional',
        'stages': ['To Do', 'In Progress', 'Review', 'Done'],
        'deadline': 'hard',
        'greeting': 'Here is where things stand.',
        'unmet_behavior': 'nothing',
    },
    {
        'name': 'Silly',
        'stages': ['Dreaming', 'Scheming', 'Doing', 'Bragging'],
        'deadline': 'soft',
        'greeting': 'What are we up to today?',
        'unmet_behavior': 'archive',
    },
]


def seed_tones(apps, schema_editor):
    Tone = apps.get_model('tones', 'Tone')
    for data in GLOBAL_TONES:
        Tone.objects.get_or_create(name=data['name'], is_global=True, user=None, defaults=data)


def remove_tones(apps, schema_editor):
    Tone = apps.get_model('tones', 'Tone')
    Tone.objects.filter(is_global=True, name__in=[t['name'] for t in GLOBAL_TONES]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('tones', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_tones, remove_tones),
    ]
