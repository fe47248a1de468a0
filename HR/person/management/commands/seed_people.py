"""
Management command to seed the roster with sample people.

Usage: python manage.py seed_people [--force]
"""
from datetime import date

from django.core.management.base import BaseCommand

from HR.person.dtos import DepartmentDTO, PersonDTO
from HR.person.exceptions import PersonValidationError
from HR.person.services import build_person_service

SAMPLE_PEOPLE = [
    ('John', 'Doe', date(1990, 1, 1), 'IT'),
    ('Jane', 'Smith', date(1995, 5, 15), 'HR'),
]


class Command(BaseCommand):
    help = 'Seeds the roster with sample people when it is empty'

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Seed even if people already exist; existing samples are skipped',
        )

    def handle(self, *args, **options):
        service = build_person_service()

        if service.list_people() and not options['force']:
            self.stdout.write(self.style.WARNING('Roster already has people; nothing seeded.'))
            return

        created = 0
        for first_name, last_name, date_of_birth, department in SAMPLE_PEOPLE:
            candidate = PersonDTO(
                first_name=first_name,
                last_name=last_name,
                date_of_birth=date_of_birth,
                department=DepartmentDTO(name=department),
            )
            try:
                person = service.add_person(candidate)
            except PersonValidationError as e:
                self.stdout.write(self.style.WARNING(f'  Skipped {first_name} {last_name}: {e.message}'))
                continue
            created += 1
            self.stdout.write(f'  Created {person.first_name} {person.last_name} (ID {person.id})')

        self.stdout.write(self.style.SUCCESS(f'Seeded {created} people.'))
