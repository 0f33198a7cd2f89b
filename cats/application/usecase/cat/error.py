"""Cat use case errors."""

from cats.application.usecase.error import NotFoundError


class CatNotFoundError(NotFoundError):
    def __init__(self, cat_id: str):
        super().__init__("Cat", cat_id)
