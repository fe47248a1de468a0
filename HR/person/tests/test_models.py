"""
Person Domain - Model and Repository Tests
===========================================
"""

from datetime import date
from django.db.models import ProtectedError
from django.test import TestCase

from HR.person.exceptions import InvalidArgumentError, PersonNotFound
from HR.person.models import Department, Person
from HR.person.repositories import DjangoDepartmentRepository, DjangoPersonRepository


class PersonModelTests(TestCase):

    def setUp(self):
        self.it = Department.objects.get(name='IT')
        self.person = Person.objects.create(
            first_name='Ann', last_name='Lee', date_of_birth=date(1990, 1, 1), department=self.it
        )

    def test_str(self):
        self.assertEqual(str(self.person), 'Ann Lee')
        self.assertEqual(str(self.it), 'IT')

    def test_department_in_use_cannot_be_deleted(self):
        with self.assertRaises(ProtectedError):
            self.it.delete()

    def test_department_people(self):
        self.assertEqual(list(self.it.people.all()), [self.person])


class DjangoPersonRepositoryTests(TestCase):

    def setUp(self):
        self.repository = DjangoPersonRepository()
        self.it = Department.objects.get(name='IT')

    def create(self, first_name='Ann', last_name='Lee', date_of_birth=date(1990, 1, 1)):
        return self.repository.create(
            Person(first_name=first_name, last_name=last_name, date_of_birth=date_of_birth, department=self.it)
        )

    def test_create_assigns_id(self):
        person = self.create()

        self.assertIsNotNone(person.id)
        self.assertEqual(self.repository.get_by_id(person.id), person)

    def test_get_by_id_missing(self):
        self.assertIsNone(self.repository.get_by_id(12345))

    def test_get_all_ordered_by_id(self):
        first = self.create()
        second = self.create(first_name='Bob')

        self.assertEqual(self.repository.get_all(), [first, second])

    def test_get_by_name_exact(self):
        person = self.create()

        self.assertEqual(self.repository.get_by_name('Ann', 'Lee'), person)
        self.assertIsNone(self.repository.get_by_name('ann', 'Lee'))
        self.assertIsNone(self.repository.get_by_name('Ann ', 'Lee'))

    def test_get_by_name_blank(self):
        for first_name, last_name in [('', 'Lee'), ('Ann', None), ('  ', 'Lee')]:
            with self.subTest(first_name=first_name, last_name=last_name):
                with self.assertRaises(InvalidArgumentError):
                    self.repository.get_by_name(first_name, last_name)

    def test_find_duplicate_matches_all_three_fields(self):
        """Any same-name row with the same birth date is found, not just the first"""
        self.create()
        second = self.create(date_of_birth=date(1992, 3, 4))

        self.assertEqual(self.repository.find_duplicate('Ann', 'Lee', date(1992, 3, 4)), second)
        self.assertIsNone(self.repository.find_duplicate('Ann', 'Lee', date(1993, 1, 1)))

    def test_find_duplicate_excludes_id(self):
        person = self.create()

        self.assertIsNone(self.repository.find_duplicate('Ann', 'Lee', date(1990, 1, 1), exclude_id=person.id))

    def test_update(self):
        person = self.create()
        person.first_name = 'Anne'
        person.department = None

        self.repository.update(person)

        stored = Person.objects.get(pk=person.id)
        self.assertEqual(stored.first_name, 'Anne')
        self.assertIsNone(stored.department)

    def test_update_missing(self):
        with self.assertRaises(PersonNotFound):
            self.repository.update(Person(id=999, first_name='Ann', last_name='Lee', date_of_birth=date(1990, 1, 1)))

    def test_delete(self):
        person = self.create()

        self.assertTrue(self.repository.delete(person.id))
        self.assertFalse(self.repository.delete(person.id))


class DjangoDepartmentRepositoryTests(TestCase):

    def test_get_by_name_is_exact(self):
        repository = DjangoDepartmentRepository()

        self.assertEqual(repository.get_by_name('HR').name, 'HR')
        self.assertIsNone(repository.get_by_name('hr'))

    def test_create(self):
        department = DjangoDepartmentRepository().create('Research')

        self.assertEqual(Department.objects.get(name='Research'), department)
