"""
Person Field Validator

Stateless checks on a candidate record. Checks run in a fixed order and
stop at the first failure:
1. First name
2. Last name
3. Date of birth
4. Department
"""
from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from HR.person.constants import (
    ALLOWED_DEPARTMENTS,
    MAXIMUM_AGE_YEARS,
    MINIMUM_AGE_YEARS,
    NAME_MAX_LENGTH,
    NAME_MIN_LENGTH,
    NAME_PATTERN,
)
from HR.person.dtos import DepartmentDTO, PersonDTO
from HR.person.exceptions import PersonValidationError
from HR.person.services.department_service import canonical_department_name


class PersonValidator:
    """Field-level validation for candidate person records"""

    def validate_common_fields(self, candidate: PersonDTO, today: Optional[date] = None) -> None:
        """
        Raise PersonValidationError for the first rule the candidate breaks.

        Args:
            candidate: Candidate record
            today: Reference date for the age window (default: date.today())
        """
        if today is None:
            today = date.today()

        self.validate_name(candidate.first_name, 'First name')
        self.validate_name(candidate.last_name, 'Last name')
        self.validate_date_of_birth(candidate.date_of_birth, today)
        self.validate_department(candidate.department)

    @staticmethod
    def validate_name(value: Optional[str], label: str) -> None:
        if value is None or not value.strip():
            raise PersonValidationError(f"{label} is required and cannot be empty.")

        if len(value) < NAME_MIN_LENGTH:
            raise PersonValidationError(
                f"{label} must be at least {NAME_MIN_LENGTH} characters long."
            )

        if len(value) > NAME_MAX_LENGTH:
            raise PersonValidationError(f"{label} cannot exceed {NAME_MAX_LENGTH} characters.")

        # Allows names like "Mary-Jane", "O'Connor" and "Van Der Berg"
        if not NAME_PATTERN.fullmatch(value):
            raise PersonValidationError(
                f"{label} contains invalid characters. "
                "Only letters, spaces, hyphens, and apostrophes are allowed."
            )

    @staticmethod
    def validate_date_of_birth(date_of_birth: Optional[date], today: date) -> None:
        if date_of_birth is None:
            raise PersonValidationError("Date of birth is required.")

        earliest = today - relativedelta(years=MAXIMUM_AGE_YEARS)
        latest = today - relativedelta(years=MINIMUM_AGE_YEARS)

        if date_of_birth > today:
            raise PersonValidationError("Date of birth cannot be in the future.")

        if date_of_birth < earliest:
            raise PersonValidationError(
                "Date of birth is too far in the past. Please verify the date."
            )

        if date_of_birth > latest:
            raise PersonValidationError(
                f"Person must be at least {MINIMUM_AGE_YEARS} years old."
            )

    @staticmethod
    def validate_department(department: Optional[DepartmentDTO]) -> None:
        if department is None:
            raise PersonValidationError("Department is required.")

        if department.name is None or not department.name.strip():
            raise PersonValidationError("Department name is required and cannot be empty.")

        if canonical_department_name(department.name) not in ALLOWED_DEPARTMENTS:
            raise PersonValidationError(
                f"Invalid department '{department.name}'. "
                f"Allowed departments are: {', '.join(ALLOWED_DEPARTMENTS)}."
            )
