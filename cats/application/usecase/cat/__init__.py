"""Cat use cases."""

from .create_cat import CreateCatRequest, CreateCatResponse, CreateCatUseCase
from .delete_cat import DeleteCatRequest, DeleteCatResponse, DeleteCatUseCase
from .error import CatNotFoundError
from .get_cat import GetCatByIdRequest, GetCatByIdResponse, GetCatByIdUseCase
from .list_cats import ListCatsUseCase
from .update_cat import UpdateCatRequest, UpdateCatResponse, UpdateCatUseCase

__all__ = [
    "CatNotFoundError",
    "CreateCatRequest",
    "CreateCatResponse",
    "CreateCatUseCase",
    "DeleteCatRequest",
    "DeleteCatResponse",
    "DeleteCatUseCase",
    "GetCatByIdRequest",
    "GetCatByIdResponse",
    "GetCatByIdUseCase",
    "ListCatsUseCase",
    "UpdateCatRequest",
    "UpdateCatResponse",
    "UpdateCatUseCase",
]
