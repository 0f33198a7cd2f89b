"""Cat DTO mapper."""

from collections.abc import Iterable

from pydantic import BaseModel

from cats.domain.model.cat import Cat


class CatDTO(BaseModel):
    """Flat projection of a Cat."""

    id: str
    name: str
    age: int | float
    breed: str


class CatMapper:
    @staticmethod
    def to_dto(cat: Cat) -> CatDTO:
        return CatDTO(id=str(cat.id), name=cat.name, age=cat.age, breed=cat.breed)

    @staticmethod
    def to_dto_list(cats: Iterable[Cat]) -> list[CatDTO]:
        return [CatMapper.to_dto(cat) for cat in cats]
