"""Unit tests for CreateCatUseCase."""

import pytest

from cats.application.usecase.cat import CreateCatRequest, CreateCatUseCase
from cats.application.usecase.error import ValidationError
from cats.domain.repository import CatRepository
from cats.domain.value import CatId
from tests.conftest import RecordingEventBus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCatUseCase:
    """Tests for CreateCatUseCase."""

    @pytest.mark.asyncio
    async def test_create_cat_success(self, unit_env):
        """Should persist the cat and return it with its id."""
        # Arrange
        cat_repo = await unit_env.get(CatRepository)
        use_case = await unit_env.get(CreateCatUseCase)

        # Act
        result = await use_case.execute(CreateCatRequest(name="Tom", age=3, breed="Siamese"))

        # Assert
        assert result.is_right()
        dto = result.value
        assert dto.name == "Tom"
        assert dto.age == 3
        assert dto.breed == "Siamese"

        stored = await cat_repo.find_by_id(CatId(dto.id))
        assert stored is not None
        assert stored.name == "Tom"

    @pytest.mark.asyncio
    async def test_create_cat_publishes_cat_created(self, unit_env):
        """Should publish exactly one CatCreated event after saving."""
        # Arrange
        cat_repo = await unit_env.get(CatRepository)
        event_bus = RecordingEventBus()
        use_case = CreateCatUseCase(cat_repo, event_bus)

        # Act
        result = await use_case.execute(CreateCatRequest(name="Tom", age=3, breed="Siamese"))

        # Assert
        assert event_bus.names() == ["cat.created"]
        assert event_bus.published[0].cat_id == result.value.id

    @pytest.mark.asyncio
    async def test_create_cat_short_name(self, unit_env):
        """Should return a ValidationError and store nothing."""
        # Arrange
        cat_repo = await unit_env.get(CatRepository)
        event_bus = RecordingEventBus()
        use_case = CreateCatUseCase(cat_repo, event_bus)

        # Act
        result = await use_case.execute(CreateCatRequest(name="T", age=3, breed="Siamese"))

        # Assert
        assert result.is_left()
        assert isinstance(result.value, ValidationError)
        assert result.value.message == "name must be at least 2 characters long"
        assert await cat_repo.find_all() == []
        assert event_bus.published == []

    @pytest.mark.asyncio
    async def test_create_cat_negative_age(self, unit_env):
        """Should reject a negative age."""
        # Arrange
        use_case = await unit_env.get(CreateCatUseCase)

        # Act
        result = await use_case.execute(CreateCatRequest(name="Tom", age=-1, breed="Siamese"))

        # Assert
        assert result.is_left()
        assert isinstance(result.value, ValidationError)

    @pytest.mark.asyncio
    async def test_create_two_cats_get_distinct_ids(self, unit_env):
        """Every cat gets its own identity."""
        # Arrange
        use_case = await unit_env.get(CreateCatUseCase)

        # Act
        first = await use_case.execute(CreateCatRequest(name="Tom", age=3, breed="Siamese"))
        second = await use_case.execute(CreateCatRequest(name="Tom", age=3, breed="Siamese"))

        # Assert
        assert first.value.id != second.value.id
