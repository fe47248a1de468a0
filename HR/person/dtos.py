"""
Data Transfer Objects for Person Domain

PersonDTO is both the candidate record submitted for create/update and the
external shape returned by PersonService. PersonDTO.from_model() is the
single mapping from the stored Person to that shape.
"""

from dataclasses import dataclass
from typing import Optional
from datetime import date

from HR.person.constants import NO_DEPARTMENT
from HR.person.models import Person


@dataclass
class DepartmentDTO:
    """Department reference by name"""
    name: Optional[str] = None


@dataclass
class PersonDTO:
    """Candidate or external person record"""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    department: Optional[DepartmentDTO] = None
    id: Optional[int] = None

    @property
    def department_name(self) -> Optional[str]:
        """Department name to resolve, or None when the person has no department"""
        if self.department is None or not self.department.name:
            return None
        return self.department.name

    @classmethod
    def from_model(cls, person: Person) -> 'PersonDTO':
        department = person.department
        return cls(
            id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
            date_of_birth=person.date_of_birth,
            department=DepartmentDTO(
                name=department.name if department is not None else NO_DEPARTMENT
            ),
        )


@dataclass
class UpdateContext:
    """
    Result of update validation, handed to the write step.

    `existing` is the stored person fetched while validating, so the write
    step does not fetch it again.
    """
    person_id: int
    existing: Person
    candidate: PersonDTO
