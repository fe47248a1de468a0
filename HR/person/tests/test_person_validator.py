"""
Person Domain - Validator Tests
================================

Field rules are checked in order (first name, last name, date of birth,
department) and the first failure is reported.
"""

from datetime import date, timedelta
from django.test import TestCase
from dateutil.relativedelta import relativedelta

from HR.person.dtos import DepartmentDTO, PersonDTO
from HR.person.exceptions import PersonValidationError
from HR.person.services import PersonValidator

TODAY = date(2026, 10, 19)


def make_candidate(**overrides):
    fields = {
        'first_name': 'John',
        'last_name': 'Doe',
        'date_of_birth': TODAY - relativedelta(years=25),
        'department': DepartmentDTO(name='IT'),
    }
    fields.update(overrides)
    return PersonDTO(**fields)


class PersonValidatorTests(TestCase):
    """Test PersonValidator.validate_common_fields"""

    def setUp(self):
        self.validator = PersonValidator()

    def assertRejected(self, candidate, expected_message):
        with self.assertRaises(PersonValidationError) as cm:
            self.validator.validate_common_fields(candidate, today=TODAY)
        self.assertIn(expected_message, cm.exception.message)
        return cm.exception

    def test_valid_candidate_passes(self):
        """A fully valid candidate raises nothing"""
        self.validator.validate_common_fields(make_candidate(), today=TODAY)

    def test_defaults_to_current_date(self):
        """Without an explicit reference date the wall-clock date is used"""
        candidate = make_candidate(date_of_birth=date.today() - relativedelta(years=30))
        self.validator.validate_common_fields(candidate)

    # ==================== NAMES ====================

    def test_empty_first_name(self):
        self.assertRejected(make_candidate(first_name=''), 'First name is required')

    def test_whitespace_first_name(self):
        self.assertRejected(make_candidate(first_name='   '), 'First name is required')

    def test_missing_first_name(self):
        self.assertRejected(make_candidate(first_name=None), 'First name is required')

    def test_short_first_name(self):
        self.assertRejected(make_candidate(first_name='A'), 'First name must be at least 2 characters long')

    def test_long_first_name(self):
        self.assertRejected(make_candidate(first_name='A' * 51), 'First name cannot exceed 50 characters')

    def test_first_name_length_bounds_accepted(self):
        for name in ['Al', 'A' * 50]:
            with self.subTest(name=name):
                self.validator.validate_common_fields(make_candidate(first_name=name), today=TODAY)

    def test_first_name_invalid_characters(self):
        for name in ['J0hn', 'John!', 'Jöhn', 'John_Doe']:
            with self.subTest(name=name):
                self.assertRejected(make_candidate(first_name=name), 'First name contains invalid characters')

    def test_punctuated_names_accepted(self):
        """Hyphens, apostrophes and spaces are allowed"""
        for name in ['Mary-Jane', "O'Connor", 'Van Der Berg']:
            with self.subTest(name=name):
                self.validator.validate_common_fields(make_candidate(last_name=name), today=TODAY)

    def test_empty_last_name(self):
        self.assertRejected(make_candidate(last_name=''), 'Last name is required')

    def test_short_last_name(self):
        self.assertRejected(make_candidate(last_name='D'), 'Last name must be at least 2 characters long')

    def test_long_last_name(self):
        self.assertRejected(make_candidate(last_name='D' * 51), 'Last name cannot exceed 50 characters')

    def test_last_name_invalid_characters(self):
        self.assertRejected(make_candidate(last_name='Doe123'), 'Last name contains invalid characters')

    # ==================== DATE OF BIRTH ====================

    def test_missing_date_of_birth(self):
        self.assertRejected(make_candidate(date_of_birth=None), 'Date of birth is required')

    def test_future_date_of_birth(self):
        self.assertRejected(
            make_candidate(date_of_birth=TODAY + timedelta(days=1)),
            'Date of birth cannot be in the future'
        )

    def test_date_of_birth_too_far_in_past(self):
        self.assertRejected(
            make_candidate(date_of_birth=TODAY - relativedelta(years=121)),
            'Date of birth is too far in the past'
        )

    def test_too_young(self):
        self.assertRejected(
            make_candidate(date_of_birth=TODAY - relativedelta(years=10)),
            'Person must be at least 16 years old'
        )

    def test_exactly_sixteen_is_valid(self):
        candidate = make_candidate(date_of_birth=date(2010, 10, 19))
        self.validator.validate_common_fields(candidate, today=TODAY)

    def test_one_day_short_of_sixteen_is_rejected(self):
        self.assertRejected(
            make_candidate(date_of_birth=date(2010, 10, 20)),
            'Person must be at least 16 years old'
        )

    def test_exactly_one_hundred_twenty_is_valid(self):
        candidate = make_candidate(date_of_birth=date(1906, 10, 19))
        self.validator.validate_common_fields(candidate, today=TODAY)

    def test_one_day_past_one_hundred_twenty_is_rejected(self):
        self.assertRejected(
            make_candidate(date_of_birth=date(1906, 10, 18)),
            'Date of birth is too far in the past'
        )

    def test_leap_day_reference_date(self):
        """On 29 Feb the sixteen-year boundary is 29 Feb of a leap year, or 28 Feb otherwise"""
        today = date(2028, 2, 29)
        self.validator.validate_common_fields(make_candidate(date_of_birth=date(2012, 2, 29)), today=today)
        with self.assertRaises(PersonValidationError):
            self.validator.validate_common_fields(make_candidate(date_of_birth=date(2012, 3, 1)), today=today)

    # ==================== DEPARTMENT ====================

    def test_missing_department(self):
        self.assertRejected(make_candidate(department=None), 'Department is required')

    def test_blank_department_name(self):
        for name in [None, '', '  ']:
            with self.subTest(name=name):
                self.assertRejected(
                    make_candidate(department=DepartmentDTO(name=name)),
                    'Department name is required and cannot be empty'
                )

    def test_invalid_department(self):
        error = self.assertRejected(
            make_candidate(department=DepartmentDTO(name='Sales')),
            "Invalid department 'Sales'"
        )
        self.assertIn('Allowed departments are: IT, HR, Finance, Operations, Legal.', error.message)

    def test_department_case_insensitive(self):
        for name in ['it', 'Hr', 'FINANCE', 'operations', 'legal']:
            with self.subTest(name=name):
                candidate = make_candidate(department=DepartmentDTO(name=name))
                self.validator.validate_common_fields(candidate, today=TODAY)

    # ==================== ORDERING ====================

    def test_first_failing_rule_is_reported(self):
        """When several rules fail, the earliest check wins"""
        candidate = make_candidate(
            first_name='A',
            last_name='',
            date_of_birth=TODAY + timedelta(days=5),
            department=DepartmentDTO(name='Sales'),
        )
        self.assertRejected(candidate, 'First name must be at least 2 characters long')

    def test_date_checked_before_department(self):
        candidate = make_candidate(
            date_of_birth=TODAY - relativedelta(years=5),
            department=None,
        )
        self.assertRejected(candidate, 'Person must be at least 16 years old')
