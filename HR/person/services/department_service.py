"""
Department Directory

Resolves a department name to a Department row, creating the row when it
is missing.
"""
import logging

from HR.person.constants import ALLOWED_DEPARTMENTS
from HR.person.models import Department
from HR.person.repositories import DepartmentRepository

logger = logging.getLogger(__name__)

_CANONICAL_NAMES = {name.lower(): name for name in ALLOWED_DEPARTMENTS}


def canonical_department_name(name: str) -> str:
    """
    Spelling of `name` as it appears in the allowed set ("it" -> "IT").

    Names outside the allowed set are returned unchanged.
    """
    return _CANONICAL_NAMES.get(name.lower(), name)


class DepartmentDirectory:
    """Get-or-create access to departments by name"""

    def __init__(self, repository: DepartmentRepository):
        self.repository = repository

    def resolve(self, name: str) -> Department:
        """
        Return the department called `name`, creating it if absent.

        The name is canonicalised first, so lookups and inserts agree with
        the validator's case-insensitive check. Legality of the name is the
        validator's job; nothing is raised here.
        """
        canonical = canonical_department_name(name)

        department = self.repository.get_by_name(canonical)
        if department is not None:
            return department

        department = self.repository.create(canonical)
        logger.info(f"Created department '{canonical}' (ID {department.id})")
        return department
