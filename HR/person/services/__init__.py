"""
Person Domain Services

Business logic for the people roster.
All create/update/delete workflows should go through PersonService.

Services:
- PersonService: Person lifecycle orchestration
- PersonValidator: Field-level rules
- DuplicateDetector: Name + date of birth uniqueness
- DepartmentDirectory: Department get-or-create
"""

from .department_service import DepartmentDirectory, canonical_department_name
from .person_validator import PersonValidator
from .duplicate_detector import DuplicateDetector
from .person_service import PersonService, build_person_service

__all__ = [
    'DepartmentDirectory',
    'DuplicateDetector',
    'PersonService',
    'PersonValidator',
    'build_person_service',
    'canonical_department_name',
]
