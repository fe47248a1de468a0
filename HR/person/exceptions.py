"""
Person Domain Errors

- PersonValidationError: field or cross-record rule violation (HTTP 400)
- InvalidArgumentError: malformed call, handled like a validation error
- PersonNotFound: update target does not exist (HTTP 404)

Storage failures are not wrapped: any django.db.DatabaseError propagates
to the caller unchanged.
"""
from django.core.exceptions import ObjectDoesNotExist, ValidationError


class RosterError(Exception):
    """Marker for errors raised by the roster core."""


class PersonValidationError(RosterError, ValidationError):
    """A candidate record breaks a roster rule. Carries one message."""


class InvalidArgumentError(PersonValidationError):
    """Malformed call: id <= 0, missing candidate or blank lookup name."""


class PersonNotFound(RosterError, ObjectDoesNotExist):
    """The person targeted by an update does not exist."""
