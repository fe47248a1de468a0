import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from HR.person.exceptions import PersonNotFound
from HR.person.serializers import PersonSerializer
from HR.person.services import build_person_service
from roster_project.response_formatter import error_response

logger = logging.getLogger(__name__)


def _message(error: ValidationError) -> str:
    return error.messages[0] if error.messages else str(error)


def _server_error(message):
    return error_response(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@api_view(['GET', 'POST'])
def person_list(request):
    """
    List people or create a new person.

    GET /api/person/  (also /api/person/all/)
    - Every person; empty list when the roster is empty

    POST /api/person/
    - Create a person from firstName, lastName, dateOfBirth, department.name
    """
    service = build_person_service()

    if request.method == 'GET':
        try:
            people = service.list_people()
        except DatabaseError:
            logger.exception("Error retrieving all people.")
            return _server_error("An error occurred while retrieving people.")
        return Response(PersonSerializer(people, many=True).data, status=status.HTTP_200_OK)

    if not request.data:
        logger.warning("Received empty person payload for creation.")
        return error_response("Person data is required.")

    serializer = PersonSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

    try:
        person = service.add_person(serializer.to_dto())
    except ValidationError as e:
        logger.warning(f"Validation failed for person creation: {_message(e)}")
        return error_response(_message(e))
    except DatabaseError:
        logger.exception("Error creating person.")
        return _server_error("An error occurred while creating the person.")

    return Response(PersonSerializer(person).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'PUT', 'DELETE'])
def person_detail(request, pk):
    """
    Retrieve, update or delete a person.

    GET /api/person/<pk>/
    PUT /api/person/<pk>/
    - Full replacement; a body "id" must match <pk> when given
    DELETE /api/person/<pk>/
    """
    service = build_person_service()

    if request.method == 'GET':
        try:
            person = service.get_person(pk)
        except DatabaseError:
            logger.exception(f"Error retrieving person with ID {pk}.")
            return _server_error("An error occurred while retrieving the person.")
        if person is None:
            return error_response(f"Person with ID {pk} not found.", status_code=status.HTTP_404_NOT_FOUND)
        return Response(PersonSerializer(person).data, status=status.HTTP_200_OK)

    if request.method == 'PUT':
        if not request.data:
            logger.warning(f"Received empty person payload for update of ID {pk}.")
            return error_response("Person data is required.")

        serializer = PersonSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        dto = serializer.to_dto()
        if dto.id is not None and dto.id != pk:
            logger.warning(f"ID mismatch: URL ID {pk} does not match body ID {dto.id}.")
            return error_response("ID in URL does not match ID in request body.")

        try:
            person = service.update_person(pk, dto)
        except PersonNotFound as e:
            return error_response(str(e), status_code=status.HTTP_404_NOT_FOUND)
        except ValidationError as e:
            logger.warning(f"Validation failed for person update with ID {pk}: {_message(e)}")
            return error_response(_message(e))
        except DatabaseError:
            logger.exception(f"Error updating person with ID {pk}.")
            return _server_error("An error occurred while updating the person.")

        return Response(PersonSerializer(person).data, status=status.HTTP_200_OK)

    try:
        deleted = service.delete_person(pk)
    except ValidationError as e:
        return error_response(_message(e))
    except DatabaseError:
        logger.exception(f"Error deleting person with ID {pk}.")
        return _server_error("An error occurred while deleting the person.")

    if not deleted:
        return error_response(f"Person with ID {pk} not found.", status_code=status.HTTP_404_NOT_FOUND)
    return Response(status=status.HTTP_204_NO_CONTENT)


@api_view(['GET'])
def person_by_name(request):
    """
    Find a person by exact first and last name.

    GET /api/person/by-name/?firstName=Ann&lastName=Lee
    """
    first_name = request.query_params.get('firstName', '')
    last_name = request.query_params.get('lastName', '')

    try:
        person = build_person_service().get_person_by_name(first_name, last_name)
    except ValidationError as e:
        return error_response(_message(e))
    except DatabaseError:
        logger.exception(f"Error looking up person '{first_name} {last_name}'.")
        return _server_error("An error occurred while retrieving the person.")

    if person is None:
        return error_response(
            f"Person named '{first_name} {last_name}' not found.",
            status_code=status.HTTP_404_NOT_FOUND,
        )
    return Response(PersonSerializer(person).data, status=status.HTTP_200_OK)
