"""
Base repository class providing common in-memory storage operations.

This class serves as a reusable foundation for repositories that keep their
entities in a plain Python list (no database engine is involved).

It defines common CRUD operations that are likely to be used across many models,
helping reduce code duplication.

While model-specific repositories can inherit from this base class to reuse
generic logic, they are also free to implement their own custom lookups as needed.
"""
from crud_example.exceptions.base import (
    DuplicateError,
    NotFoundError,
    InvalidFieldError,
)
from crud_example.validators.model_validators import find_unknown_fields

from dataclasses import fields, replace
from typing import TypeVar, Generic, Type, Any, Callable, Iterable
import logging

# Type variable for the entity class (a dataclass)
ModelType = TypeVar("ModelType")

logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations over a list.

    Type Parameters:
        ModelType: The entity dataclass this repository manages.
    """

    def __init__(self, model: Type[ModelType], id_field: str, entities: Iterable[ModelType] | None = None):
        """
        Initialize the repository.

        Args:
            model: The entity dataclass (e.g. Country, not Country(...))
            id_field: Name of the identifier attribute (e.g. "country_id")
            entities: Optional initial contents; copied, never shared with the caller
        """
        if id_field not in {f.name for f in fields(model)}:
            raise InvalidFieldError(f"{model.__name__} has no field '{id_field}'", fields=[id_field])

        self.model = model
        self.id_field = id_field
        self._entities: list[ModelType] = list(entities or [])

    def _id_of(self, entity: ModelType) -> Any:
        return getattr(entity, self.id_field)

    def _check_field(self, field: str) -> None:
        if find_unknown_fields(self.model, {field: None}):
            raise InvalidFieldError(f"{self.model.__name__} has no field '{field}'", fields=[field])

    # =================================================================================================================
    # Create Operations
    # =================================================================================================================

    def add(self, entity: ModelType) -> ModelType:
        """
        Append an entity to the collection.

        Raises:
            TypeError: If `entity` is not an instance of the managed model.
            DuplicateError: If an entity with the same identifier is already stored.
        """
        if not isinstance(entity, self.model):
            raise TypeError(f"Expected {self.model.__name__}, got {type(entity).__name__}")

        entity_id = self._id_of(entity)
        if self.exists(entity_id):
            logger.info(
                "repo.add.duplicate_id",
                extra={"model": self.model.__name__, "operation": "add", "entity_id": str(entity_id)},
            )
            raise DuplicateError(
                f"{self.model.__name__} with ID {entity_id} already exists", fields=[self.id_field]
            )

        self._entities.append(entity)
        logger.debug(
            "repo.add.success",
            extra={"model": self.model.__name__, "operation": "add", "entity_id": str(entity_id)},
        )
        return entity

    # =================================================================================================================
    # Read Operations (Single Entity)
    # =================================================================================================================

    def get_by_id(self, entity_id: Any) -> ModelType | None:
        """
        Get an entity by its identifier.

        Returns:
            The entity if found, otherwise None (also for a None identifier)
        """
        if entity_id is None:
            return None
        return next((e for e in self._entities if self._id_of(e) == entity_id), None)

    def get_by_id_or_raise(self, entity_id: Any) -> ModelType:
        """
        Get an entity by its identifier or raise NotFoundError.
        """
        entity = self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.model.__name__} with ID {entity_id} not found", fields=[self.id_field])
        return entity

    def find_by_field(self, field: str, value: Any) -> ModelType | None:
        """
        Find the first entity whose `field` equals `value`.

        Raises:
            InvalidFieldError: If the field does not exist on the model
        """
        self._check_field(field)
        return next((e for e in self._entities if getattr(e, field) == value), None)

    # =================================================================================================================
    # Read Operations (Multiple Entities)
    # =================================================================================================================

    def get_all(
        self,
        offset: int = 0,                # Used for pagination: how many records to skip
        limit: int | None = None,       # Max number of records to return (None = all)
        order_by: str | None = None     # Optional: field to sort results by
    ) -> list[ModelType]:
        """
        Get all entities in insertion order, with optional ordering and pagination.

        An unknown `order_by` field is ignored with a warning, as is ordering on a
        field that holds None for some entities.
        """
        entities = list(self._entities)

        if order_by:
            if find_unknown_fields(self.model, {order_by: None}):
                logger.warning(
                    f"Ignored invalid 'order_by' field: '{order_by}' does not exist on {self.model.__name__}")
            else:
                try:
                    entities = sorted(entities, key=lambda e: getattr(e, order_by))
                except TypeError:
                    logger.warning(f"Ignored 'order_by' field '{order_by}': values are not comparable")

        end = None if limit is None else offset + limit
        return entities[offset:end]

    def find_all(self, predicate: Callable[[ModelType], bool]) -> list[ModelType]:
        """Return every entity for which `predicate(entity)` is truthy."""
        return [e for e in self._entities if predicate(e)]

    # =================================================================================================================
    # Update Operations
    # =================================================================================================================

    def update(self, entity_id: Any, **changes: Any) -> ModelType | None:
        """
        Replace the given fields of an entity.

        Unlike a partial "patch", None values are applied as-is: callers pass the
        complete new state of every field they want changed.

        Returns:
            The updated entity if found, None otherwise

        Raises:
            InvalidFieldError: If `changes` names unknown fields or the identifier field
        """
        unknown = find_unknown_fields(self.model, changes)
        if unknown:
            logger.info(
                "repo.update.invalid_fields",
                extra={"model": self.model.__name__, "operation": "update", "invalid_fields": sorted(unknown)},
            )
            raise InvalidFieldError(
                f"Unknown field(s) for {self.model.__name__}: {', '.join(unknown)}", fields=unknown)

        if self.id_field in changes:
            raise InvalidFieldError(
                f"{self.model.__name__}.{self.id_field} cannot be changed", fields=[self.id_field])

        for index, entity in enumerate(self._entities):
            if self._id_of(entity) == entity_id:
                updated = replace(entity, **changes)
                self._entities[index] = updated
                logger.debug(
                    "repo.update.success",
                    extra={
                        "model": self.model.__name__,
                        "operation": "update",
                        "entity_id": str(entity_id),
                        "changed_keys": sorted(changes.keys()),
                    },
                )
                return updated

        logger.warning(f"{self.model.__name__} with ID {entity_id} not found for update")
        return None

    # =================================================================================================================
    # Delete Operations
    # =================================================================================================================

    def delete(self, entity_id: Any) -> bool:
        """
        Delete an entity by its identifier.

        Returns:
            True if entity was deleted, False if not found
        """
        entity = self.get_by_id(entity_id)
        if entity is None:
            logger.warning(f"{self.model.__name__} with ID {entity_id} not found for deletion")
            return False

        self._entities.remove(entity)
        logger.debug(f"Deleted {self.model.__name__} with ID: {entity_id}")
        return True

        # Why return `bool` instead of raising `NotFoundError`?
        #   - Deletion is idempotent: deleting something that doesn't exist just means
        #     "already deleted" or "never existed".
        #   - Services that need strict existence can call `get_by_id_or_raise()` first.

    # =================================================================================================================
    # Validation / Existence Checks
    # =================================================================================================================

    def exists(self, entity_id: Any) -> bool:
        return self.get_by_id(entity_id) is not None

    # =================================================================================================================
    # Aggregation / Count Operations
    # =================================================================================================================

    def count(self, **filters: Any) -> int:
        """
        Count entities matching every `field=value` filter (all entities without filters).

        Raises:
            InvalidFieldError: If a filter names an unknown field
        """
        unknown = find_unknown_fields(self.model, filters)
        if unknown:
            raise InvalidFieldError(
                f"Unknown field(s) for {self.model.__name__}: {', '.join(unknown)}", fields=unknown)

        return sum(
            1 for e in self._entities
            if all(getattr(e, field) == value for field, value in filters.items())
        )

    def __len__(self) -> int:
        return len(self._entities)


# BaseRepository Method Summary
# | Method Name                        | Purpose                                                 | Returns                                 |
# | ---------------------------------- | ------------------------------------------------------- | --------------------------------------- |
# | `add(entity)`                      | Append a new entity                                     | The stored entity                       |
# | `get_by_id(entity_id)`             | Retrieve a single entity by its identifier              | Entity or `None`                        |
# | `get_by_id_or_raise(id)`           | Same as `get_by_id`, but raises `NotFoundError`         | Entity                                  |
# | `find_by_field(field, value)`      | First entity whose field equals value                   | Entity or `None`                        |
# | `get_all(offset, limit, order_by)` | All entities, optional ordering and pagination          | List of entities                        |
# | `find_all(predicate)`              | All entities matching a predicate                       | List of entities                        |
# | `update(id, **changes)`            | Replace the given fields of an entity                   | Updated entity or `None`                |
# | `delete(entity_id)`                | Remove an entity                                        | `True` if deleted, `False` if not found |
# | `exists(entity_id)`                | Existence check                                         | `True` / `False`                        |
# | `count(**filters)`                 | Number of entities matching equality filters            | Integer count                           |
