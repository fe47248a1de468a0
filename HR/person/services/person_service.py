"""
Person Service - Business Logic Layer

Handles the person record lifecycle:
- Create (validate, reject duplicates, resolve department, persist)
- Read by id, by name, and list
- Update (full replacement of names, date of birth and department)
- Delete (permanent)

All roster writes MUST go through this service.
"""
import logging
from typing import List, Optional

from django.db import transaction

from HR.person.dtos import PersonDTO, UpdateContext
from HR.person.exceptions import InvalidArgumentError, PersonNotFound
from HR.person.models import Department, Person
from HR.person.repositories import (
    DjangoDepartmentRepository,
    DjangoPersonRepository,
    PersonRepository,
)
from HR.person.services.department_service import DepartmentDirectory
from HR.person.services.duplicate_detector import DuplicateDetector
from HR.person.services.person_validator import PersonValidator

logger = logging.getLogger(__name__)


class PersonService:
    """Orchestrates validation, duplicate detection, departments and storage"""

    def __init__(
        self,
        validator: PersonValidator,
        duplicate_detector: DuplicateDetector,
        department_directory: DepartmentDirectory,
        repository: PersonRepository,
    ):
        self.validator = validator
        self.duplicate_detector = duplicate_detector
        self.department_directory = department_directory
        self.repository = repository

    @transaction.atomic
    def add_person(self, candidate: Optional[PersonDTO]) -> PersonDTO:
        """
        Create a person from a candidate record.

        Raises:
            InvalidArgumentError: candidate is missing
            PersonValidationError: a field rule fails or the person already exists
        """
        if candidate is None:
            raise InvalidArgumentError("Person data is required.")

        self.validator.validate_common_fields(candidate)
        self.duplicate_detector.check_for_create(candidate)

        person = Person(
            first_name=candidate.first_name,
            last_name=candidate.last_name,
            date_of_birth=candidate.date_of_birth,
            department=self._resolve_department(candidate),
        )
        created = self.repository.create(person)

        logger.info(f"Created person {created.full_name} (ID {created.id})")
        return PersonDTO.from_model(created)

    def get_person(self, person_id: int) -> Optional[PersonDTO]:
        """Person with the given id, or None when it does not exist."""
        person = self.repository.get_by_id(person_id)
        if person is None:
            logger.warning(f"Person with ID {person_id} not found.")
            return None
        return PersonDTO.from_model(person)

    def get_person_by_name(self, first_name: str, last_name: str) -> Optional[PersonDTO]:
        """
        Exact-match lookup on first and last name.

        Raises:
            InvalidArgumentError: either name is blank
        """
        person = self.repository.get_by_name(first_name, last_name)
        if person is None:
            logger.warning(f"Person named '{first_name} {last_name}' not found.")
            return None
        return PersonDTO.from_model(person)

    def list_people(self) -> List[PersonDTO]:
        people = self.repository.get_all()
        if not people:
            logger.info("No people found in the database.")
            return []
        return [PersonDTO.from_model(person) for person in people]

    @transaction.atomic
    def update_person(self, person_id: int, candidate: Optional[PersonDTO]) -> PersonDTO:
        """
        Replace a person's names, date of birth and department.

        Raises:
            InvalidArgumentError: person_id <= 0 or candidate is missing
            PersonNotFound: no person with person_id
            PersonValidationError: a field rule fails or another person clashes
        """
        context = self._validate_for_update(person_id, candidate)

        person = context.existing
        person.first_name = candidate.first_name
        person.last_name = candidate.last_name
        person.date_of_birth = candidate.date_of_birth
        person.department = self._resolve_department(candidate)

        updated = self.repository.update(person)

        logger.info(f"Updated person {updated.full_name} (ID {updated.id})")
        return PersonDTO.from_model(updated)

    @transaction.atomic
    def delete_person(self, person_id: int) -> bool:
        """
        Permanently delete a person.

        Returns:
            bool: False when the person does not exist

        Raises:
            InvalidArgumentError: person_id <= 0
        """
        if person_id is None or person_id <= 0:
            raise InvalidArgumentError("Valid Person ID is required for deletion.")

        if self.repository.get_by_id(person_id) is None:
            logger.warning(f"Person with ID {person_id} not found for deletion.")
            return False

        deleted = self.repository.delete(person_id)
        if deleted:
            logger.info(f"Deleted person with ID {person_id}")
        return deleted

    def _validate_for_update(self, person_id: int, candidate: Optional[PersonDTO]) -> UpdateContext:
        if person_id is None or person_id <= 0:
            raise InvalidArgumentError("Valid Person ID is required for update.")

        if candidate is None:
            raise InvalidArgumentError("Person data is required for update.")

        existing = self.repository.get_by_id(person_id)
        if existing is None:
            logger.warning(f"Person with ID {person_id} not found for update.")
            raise PersonNotFound(f"Person with ID {person_id} does not exist.")

        self.validator.validate_common_fields(candidate)
        self.duplicate_detector.check_for_update(person_id, candidate)

        return UpdateContext(person_id=person_id, existing=existing, candidate=candidate)

    def _resolve_department(self, candidate: PersonDTO) -> Optional[Department]:
        name = candidate.department_name
        if name is None:
            return None
        return self.department_directory.resolve(name)


def build_person_service() -> PersonService:
    """PersonService wired to the Django ORM adapters."""
    person_repository = DjangoPersonRepository()
    return PersonService(
        validator=PersonValidator(),
        duplicate_detector=DuplicateDetector(person_repository),
        department_directory=DepartmentDirectory(DjangoDepartmentRepository()),
        repository=person_repository,
    )
