"""
Roster rules shared by the validator, the department directory and the
wire mapping.
"""
import re

# Departments seeded at startup; the only names a person may reference.
ALLOWED_DEPARTMENTS = ('IT', 'HR', 'Finance', 'Operations', 'Legal')

# Display value for a person without a department.
NO_DEPARTMENT = 'No Department'

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50
NAME_PATTERN = re.compile(r"[a-zA-Z\s'-]+")

MINIMUM_AGE_YEARS = 16
MAXIMUM_AGE_YEARS = 120
