"""
Wire serializers for the people roster.

Wire shape:
{
    "id": 1,
    "firstName": "Ann",
    "lastName": "Lee",
    "dateOfBirth": "1990-01-01",
    "department": {"name": "IT"}
}

Only types are checked here (string, ISO date, integer id). Roster rules
such as name length or allowed departments belong to PersonValidator, so
every field is optional at this layer and reaches the validator as-is.
"""
from rest_framework import serializers

from HR.person.dtos import DepartmentDTO, PersonDTO


class DepartmentSerializer(serializers.Serializer):
    name = serializers.CharField(
        required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )


class PersonSerializer(serializers.Serializer):
    """Read/write serializer between the wire shape and PersonDTO"""
    id = serializers.IntegerField(required=False, allow_null=True)
    firstName = serializers.CharField(
        source='first_name', required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    lastName = serializers.CharField(
        source='last_name', required=False, allow_null=True, allow_blank=True, trim_whitespace=False
    )
    dateOfBirth = serializers.DateField(source='date_of_birth', required=False, allow_null=True)
    department = DepartmentSerializer(required=False, allow_null=True)

    def to_dto(self) -> PersonDTO:
        data = self.validated_data
        department = data.get('department')
        return PersonDTO(
            id=data.get('id'),
            first_name=data.get('first_name'),
            last_name=data.get('last_name'),
            date_of_birth=data.get('date_of_birth'),
            department=DepartmentDTO(name=department.get('name')) if department is not None else None,
        )
