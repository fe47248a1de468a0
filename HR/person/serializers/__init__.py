from .person_serializers import DepartmentSerializer, PersonSerializer

__all__ = [
    'DepartmentSerializer',
    'PersonSerializer',
]
