"""
Generic Repository

Data-access abstraction that keeps routers away from direct session calls.

Contract per entity type:
- find_all()        -> list of entities (empty list when the table is empty)
- find_by_id(id)    -> entity or None (absence is not an error)
- exists(id)        -> bool
- create(entity)    -> bool, entity.id populated on success
- update(entity)    -> bool, True only if exactly one row changed
- delete(entity)    -> bool

Mutations report their *expected* outcome as a boolean so routers can
choose 201/204 versus 500 without inspecting exception types. Database
faults (lost connection, constraint violations) are not expected outcomes:
the session is rolled back and the exception propagates to the
application's exception handlers.
"""

from typing import Any, ClassVar, Generic, Sequence, TypeVar

from sqlalchemy import inspect, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.interfaces import LoaderOption

from bookstore_api.database import Base
from bookstore_api.services.logger import LoggerService

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    CRUD operations for one SQLAlchemy model.

    Subclasses set `model` and, optionally, `load_options` to eager-load
    relationships on every read.

    Example:
        class AuthorRepository(BaseRepository[Author]):
            model = Author
            load_options = (selectinload(Author.books),)
    """

    model: ClassVar[type[Any]]
    load_options: ClassVar[Sequence[LoaderOption]] = ()

    def __init__(self, session: Session, logger: LoggerService) -> None:
        self.session = session
        self.logger = logger

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def _select(self):
        return select(self.model).options(*self.load_options)

    def find_all(self) -> list[ModelT]:
        """Return every row, ordered by primary key."""
        self.logger.debug(f"{self.entity_name}: find_all")
        stmt = self._select().order_by(self.model.id)
        return list(self.session.execute(stmt).scalars().all())

    def find_by_id(self, entity_id: int) -> ModelT | None:
        """Return the row with the given id, or None."""
        self.logger.debug(f"{self.entity_name}: find_by_id({entity_id})")
        stmt = self._select().where(self.model.id == entity_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def exists(self, entity_id: int) -> bool:
        """Check whether a row with the given id is stored."""
        stmt = select(self.model.id).where(self.model.id == entity_id)
        return self.session.execute(stmt).scalar_one_or_none() is not None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def create(self, entity: ModelT) -> bool:
        """Insert a new row. On success the generated id is set on `entity`."""
        self.session.add(entity)
        self._save()
        created = entity.id is not None
        self.logger.debug(f"{self.entity_name}: create -> {created}")
        return created

    def update(self, entity: ModelT) -> bool:
        """
        Persist the attributes set on `entity` to the row with its id.

        `entity` is usually a detached instance built from an update DTO,
        so only attributes that were explicitly assigned are written.
        Columns such as created_at keep their stored values.
        """
        values = self._assigned_column_values(entity)
        stmt = (
            update(self.model)
            .where(self.model.id == entity.id)
            .values(**values)
        )
        result = self._execute(stmt)
        self._save()
        updated = result.rowcount == 1
        self.logger.debug(f"{self.entity_name}: update({entity.id}) -> {updated}")
        return updated

    def delete(self, entity: ModelT) -> bool:
        """Delete a row previously loaded through this repository's session."""
        self.session.delete(entity)
        self._save()
        deleted = inspect(entity).was_deleted
        self.logger.debug(f"{self.entity_name}: delete -> {deleted}")
        return deleted

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    def _execute(self, stmt):
        """Run a write statement; constraint faults surface here, not at commit."""
        try:
            return self.session.execute(stmt)
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def _save(self) -> None:
        """Commit the unit of work, rolling back before a fault propagates."""
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise

    def _assigned_column_values(self, entity: ModelT) -> dict[str, Any]:
        state = inspect(entity)
        primary_keys = {column.key for column in state.mapper.primary_key}
        return {
            attr.key: state.dict[attr.key]
            for attr in state.mapper.column_attrs
            if attr.key in state.dict and attr.key not in primary_keys
        }
