"""
Storage Adapters

PersonRepository and DepartmentRepository describe the storage the roster
core needs. The Django ORM implementations are the ones wired in by
build_person_service(); tests may pass their own.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from HR.person.exceptions import InvalidArgumentError, PersonNotFound
from HR.person.models import Department, Person


class PersonRepository(ABC):
    """Storage for Person records"""

    @abstractmethod
    def get_by_id(self, person_id: int) -> Optional[Person]:
        ...

    @abstractmethod
    def get_all(self) -> List[Person]:
        ...

    @abstractmethod
    def get_by_name(self, first_name: str, last_name: str) -> Optional[Person]:
        """Exact match on both names. Returns one arbitrary match if several exist."""

    @abstractmethod
    def find_duplicate(
        self,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        exclude_id: Optional[int] = None,
    ) -> Optional[Person]:
        """Exact match on both names and date of birth, skipping exclude_id."""

    @abstractmethod
    def create(self, person: Person) -> Person:
        """Persist a new person and return it with its assigned id."""

    @abstractmethod
    def update(self, person: Person) -> Person:
        ...

    @abstractmethod
    def delete(self, person_id: int) -> bool:
        ...


class DepartmentRepository(ABC):
    """Storage for Department records"""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Department]:
        ...

    @abstractmethod
    def create(self, name: str) -> Department:
        ...


class DjangoPersonRepository(PersonRepository):

    def _queryset(self):
        return Person.objects.select_related('department')

    def get_by_id(self, person_id):
        return self._queryset().filter(pk=person_id).first()

    def get_all(self):
        return list(self._queryset().order_by('id'))

    def get_by_name(self, first_name, last_name):
        if not first_name or not first_name.strip() or not last_name or not last_name.strip():
            raise InvalidArgumentError("First name and last name cannot be null or empty.")
        return (
            self._queryset()
            .filter(first_name=first_name, last_name=last_name)
            .order_by('id')
            .first()
        )

    def find_duplicate(self, first_name, last_name, date_of_birth, exclude_id=None):
        queryset = self._queryset().filter(
            first_name=first_name,
            last_name=last_name,
            date_of_birth=date_of_birth,
        )
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id)
        return queryset.order_by('id').first()

    def create(self, person):
        if person is None:
            raise InvalidArgumentError("Person is required.")
        person.save(force_insert=True)
        return person

    def update(self, person):
        if person.pk is None or not Person.objects.filter(pk=person.pk).exists():
            raise PersonNotFound(f"Person with ID {person.pk} does not exist.")
        person.save(update_fields=['first_name', 'last_name', 'date_of_birth', 'department'])
        return person

    def delete(self, person_id):
        deleted, _ = Person.objects.filter(pk=person_id).delete()
        return deleted > 0


class DjangoDepartmentRepository(DepartmentRepository):

    def get_by_name(self, name):
        return Department.objects.filter(name=name).first()

    def create(self, name):
        return Department.objects.create(name=name)
