"""Cat routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from cats.application.mapper.cat import CatDTO
from cats.application.usecase.cat import (
    CreateCatRequest,
    CreateCatUseCase,
    DeleteCatRequest,
    DeleteCatUseCase,
    GetCatByIdRequest,
    GetCatByIdUseCase,
    ListCatsUseCase,
    UpdateCatRequest,
    UpdateCatUseCase,
)
from cats.application.usecase.error import NotFoundError, UseCaseError

router = APIRouter(prefix="/cats", tags=["cats"], route_class=DishkaRoute)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class CreateCatAPIRequest(BaseModel):
    """API request for creating a cat.

    Name length and age range are enforced by the aggregate and reported as 400.
    """

    name: str
    age: int | float
    breed: str


class UpdateCatAPIRequest(BaseModel):
    """API request for updating a cat. Omitted fields are left unchanged."""

    name: str | None = None
    age: int | float | None = None
    breed: str | None = None


class MessageResponse(BaseModel):
    status: str
    message: str


class CatCreatedResponse(BaseModel):
    status: str
    message: str
    data: CatDTO


class CatResponse(BaseModel):
    status: str
    data: CatDTO


class CatListResponse(BaseModel):
    status: str
    data: list[CatDTO]


ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": MessageResponse},
    status.HTTP_404_NOT_FOUND: {"model": MessageResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": MessageResponse},
}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"status": "error", "message": message},
    )


def _left_response(error: UseCaseError) -> JSONResponse:
    """Map a use case error to its HTTP status."""
    if isinstance(error, NotFoundError):
        return _error_response(status.HTTP_404_NOT_FOUND, error.message)
    return _error_response(status.HTTP_400_BAD_REQUEST, error.message)


@router.post(
    "",
    response_model=CatCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
async def create_cat(
    request: CreateCatAPIRequest,
    create_cat_use_case: FromDishka[CreateCatUseCase],
) -> CatCreatedResponse | JSONResponse:
    """Register a new cat.

    Args:
        request: Cat data
        create_cat_use_case: Create cat use case from DI

    Returns:
        The created cat, including its generated ID
    """
    try:
        result = await create_cat_use_case.execute(
            CreateCatRequest(name=request.name, age=request.age, breed=request.breed)
        )
    except Exception as e:
        logfire.error("Unexpected error creating cat", error=str(e))
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    if result.is_left():
        logfire.warn("Cat creation rejected", error=result.value.message)
        return _left_response(result.value)

    return CatCreatedResponse(
        status="success",
        message="Cat created successfully",
        data=result.value,
    )


@router.get("", response_model=CatListResponse, responses=ERROR_RESPONSES)
async def list_cats(
    list_cats_use_case: FromDishka[ListCatsUseCase],
) -> CatListResponse | JSONResponse:
    """List every cat."""
    try:
        cats = await list_cats_use_case.execute()
    except Exception as e:
        logfire.error("Unexpected error listing cats", error=str(e))
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    return CatListResponse(status="success", data=cats)


@router.get("/{cat_id}", response_model=CatResponse, responses=ERROR_RESPONSES)
async def get_cat(
    cat_id: str,
    get_cat_use_case: FromDishka[GetCatByIdUseCase],
) -> CatResponse | JSONResponse:
    """Get a single cat by ID.

    Unknown IDs are reported as 404.
    """
    try:
        result = await get_cat_use_case.execute(GetCatByIdRequest(cat_id=cat_id))
    except Exception as e:
        logfire.error("Unexpected error getting cat", cat_id=cat_id, error=str(e))
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    if result.is_left():
        return _left_response(result.value)

    return CatResponse(status="success", data=result.value)


@router.patch("/{cat_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def update_cat(
    cat_id: str,
    request: UpdateCatAPIRequest,
    update_cat_use_case: FromDishka[UpdateCatUseCase],
) -> MessageResponse | JSONResponse:
    """Partially update a cat."""
    try:
        result = await update_cat_use_case.execute(
            UpdateCatRequest(
                cat_id=cat_id,
                name=request.name,
                age=request.age,
                breed=request.breed,
            )
        )
    except Exception as e:
        logfire.error("Unexpected error updating cat", cat_id=cat_id, error=str(e))
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    if result.is_left():
        logfire.warn("Cat update rejected", cat_id=cat_id, error=result.value.message)
        return _left_response(result.value)

    return MessageResponse(status="success", message="Cat updated successfully")


@router.delete("/{cat_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def delete_cat(
    cat_id: str,
    delete_cat_use_case: FromDishka[DeleteCatUseCase],
) -> MessageResponse | JSONResponse:
    """Delete a cat."""
    try:
        result = await delete_cat_use_case.execute(DeleteCatRequest(cat_id=cat_id))
    except Exception as e:
        logfire.error("Unexpected error deleting cat", cat_id=cat_id, error=str(e))
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    if result.is_left():
        return _left_response(result.value)

    return MessageResponse(status="success", message="Cat deleted successfully")
