from django.db import migrations

SEED_DEPARTMENTS = ['IT', 'HR', 'Finance', 'Operations', 'Legal']


def create_departments(apps, schema_editor):
    Department = apps.get_model('person', 'Department')

    # Use get_or_create to be idempotent
    for name in SEED_DEPARTMENTS:
        Department.objects.get_or_create(name=name)


def remove_departments(apps, schema_editor):
    Department = apps.get_model('person', 'Department')
    Department.objects.filter(name__in=SEED_DEPARTMENTS, people__isnull=True).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('person', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(create_departments, remove_departments),
    ]
