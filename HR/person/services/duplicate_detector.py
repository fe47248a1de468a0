"""
Duplicate Detector

No two people may share the same first name, last name and date of birth.
Names are compared exactly as stored (no case or whitespace folding).
"""
from HR.person.dtos import PersonDTO
from HR.person.exceptions import PersonValidationError
from HR.person.repositories import PersonRepository


class DuplicateDetector:
    """Cross-record uniqueness checks for create and update"""

    def __init__(self, repository: PersonRepository):
        self.repository = repository

    def check_for_create(self, candidate: PersonDTO) -> None:
        existing = self.repository.find_duplicate(
            candidate.first_name, candidate.last_name, candidate.date_of_birth
        )
        if existing is not None:
            raise PersonValidationError(
                f"A person with the name '{candidate.first_name} {candidate.last_name}' "
                f"and date of birth '{candidate.date_of_birth.isoformat()}' already exists."
            )

    def check_for_update(self, person_id: int, candidate: PersonDTO) -> None:
        """Same rule as create, but the person being updated never clashes with itself."""
        existing = self.repository.find_duplicate(
            candidate.first_name, candidate.last_name, candidate.date_of_birth,
            exclude_id=person_id,
        )
        if existing is not None:
            raise PersonValidationError(
                f"Another person with the name '{candidate.first_name} {candidate.last_name}' "
                f"and date of birth '{candidate.date_of_birth.isoformat()}' already exists."
            )
