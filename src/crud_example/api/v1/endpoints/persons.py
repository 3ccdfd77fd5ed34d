"""
Person endpoints for API v1.

The list endpoint mirrors the persons screen: it filters by `search_by`/`search_string`
first and then sorts the result by `sort_by`/`sort_order`.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from crud_example.core.dependencies import get_persons_service
from crud_example.exceptions.base import NotFoundError
from crud_example.schemas.enums import SortOrderOptions
from crud_example.schemas.person import PersonAddRequest, PersonResponse, PersonUpdateRequest
from crud_example.services.persons_service import PersonsService

router = APIRouter()


@router.get("", response_model=list[PersonResponse])
def list_persons(
    search_by: str | None = Query(None, description="Field to search in, e.g. person_name"),
    search_string: str | None = Query(None, description="Text to look for"),
    sort_by: str | None = Query("person_name", description="Field to sort on"),
    sort_order: SortOrderOptions = Query(SortOrderOptions.ASC),
    persons_service: PersonsService = Depends(get_persons_service),
) -> list[PersonResponse]:
    persons = persons_service.get_filtered_persons(search_by, search_string)
    return persons_service.get_sorted_persons(persons, sort_by, sort_order)


@router.get("/{person_id}", response_model=PersonResponse)
def get_person(
    person_id: UUID,
    persons_service: PersonsService = Depends(get_persons_service),
) -> PersonResponse:
    person = persons_service.get_person_by_person_id(person_id)
    if person is None:
        raise NotFoundError("Given person id doesn't exist", fields=["person_id"])
    return person


@router.post("", response_model=PersonResponse, status_code=status.HTTP_201_CREATED)
def add_person(
    person_add_request: PersonAddRequest,
    persons_service: PersonsService = Depends(get_persons_service),
) -> PersonResponse:
    return persons_service.add_person(person_add_request)


@router.put("/{person_id}", response_model=PersonResponse)
def update_person(
    person_id: UUID,
    person_update_request: PersonUpdateRequest,
    persons_service: PersonsService = Depends(get_persons_service),
) -> PersonResponse:
    """Replace the person's details. The id in the path wins over any id in the body."""
    request = person_update_request.model_copy(update={"person_id": person_id})
    return persons_service.update_person(request)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_person(
    person_id: UUID,
    persons_service: PersonsService = Depends(get_persons_service),
) -> Response:
    if not persons_service.delete_person(person_id):
        raise NotFoundError("Given person id doesn't exist", fields=["person_id"])
    return Response(status_code=status.HTTP_204_NO_CONTENT)
