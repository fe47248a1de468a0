"""
Person Domain Models

Models:
- Department: Named department a person belongs to
- Person: Roster entry (first name, last name, date of birth, department)
"""

from .department import Department
from .person import Person

__all__ = [
    'Department',
    'Person',
]
