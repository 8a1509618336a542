"""Generic async CRUD repository shared by every entity type."""

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, ClassVar, Generic, Iterable, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConstraintViolation, classify_storage_error
from app.core.logging import get_logger
from app.core.metrics import record_db_operation, record_repository_error
from app.db.base import Base, stamp_audit_fields

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """
    Standard storage operations for one mapped class.

    Each public call is its own transaction on the bound session: writes
    commit on success and roll back before re-raising on failure, reads
    reload rows from the database (never from the identity map) and end
    their transaction before returning. Lookups that match nothing return
    None, never raise.
    """

    model_class: ClassVar[type[Any]]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _raise_storage_error(self, exc: DBAPIError, operation: str) -> None:
        await self.session.rollback()
        kind = classify_storage_error(exc)
        if kind is None:
            raise exc
        record_repository_error(kind.metric_kind)
        log = logger.warning if kind is ConstraintViolation else logger.error
        log(
            f"repository_{kind.metric_kind}",
            entity=self.model_class.__name__,
            operation=operation,
            error=str(exc.orig),
        )
        raise kind(str(exc.orig)) from exc

    @asynccontextmanager
    async def _write(self, operation: str) -> AsyncIterator[None]:
        try:
            yield
            await self.session.commit()
        except DBAPIError as exc:
            await self._raise_storage_error(exc, operation)
        except Exception:
            await self.session.rollback()
            raise
        record_db_operation("delete" if operation.startswith("delete") else "write")

    async def _execute(self, statement, params: dict | None = None):
        # Unsaved attribute changes stay unsaved: no autoflush, and rows
        # already in the identity map are overwritten with what is stored.
        try:
            with self.session.sync_session.no_autoflush:
                result = await self.session.execute(
                    statement,
                    params,
                    execution_options={"populate_existing": True},
                )
        except DBAPIError as exc:
            await self._raise_storage_error(exc, "read")
        record_db_operation("read")
        return result

    async def _end_read(self) -> None:
        """Close the read transaction unless the caller has changes waiting for save()."""
        pending = self.session.sync_session
        if self.session.in_transaction() and not (pending.new or pending.dirty or pending.deleted):
            await self.session.commit()

    async def _flush(self) -> None:
        # run_sync: the gateway may read expired state, which needs the greenlet
        await self.session.run_sync(stamp_audit_fields)
        await self.session.flush()

    async def save(self, entity: ModelT) -> ModelT:
        """Insert or update an entity; id and audit fields are set on return."""
        async with self._write("save"):
            self.session.add(entity)
            await self._flush()
        await self.session.refresh(entity)
        await self._end_read()
        logger.debug("entity_saved", entity=self.model_class.__name__, id=entity.id)
        return entity

    async def save_all(self, entities: Iterable[ModelT]) -> list[ModelT]:
        entities = list(entities)
        async with self._write("save_all"):
            self.session.add_all(entities)
            await self._flush()
        for entity in entities:
            await self.session.refresh(entity)
        await self._end_read()
        logger.debug("entities_saved", entity=self.model_class.__name__, count=len(entities))
        return entities

    async def _scalar_one_or_none(self, statement, params: dict | None = None):
        result = await self._execute(statement, params)
        entity = result.scalar_one_or_none()
        await self._end_read()
        return entity

    async def _scalars(self, statement, params: dict | None = None) -> list:
        result = await self._execute(statement, params)
        entities = list(result.scalars().all())
        await self._end_read()
        return entities

    async def find_by_id(self, entity_id: int) -> ModelT | None:
        # select() rather than session.get() so subclass views apply their discriminator
        return await self._scalar_one_or_none(
            select(self.model_class).where(self.model_class.id == entity_id)
        )

    async def exists_by_id(self, entity_id: int) -> bool:
        query = select(self.model_class.id).where(self.model_class.id == entity_id)
        return await self._scalar_one_or_none(select(func.count()).select_from(query.subquery())) > 0

    async def find_all(self) -> list[ModelT]:
        return await self._scalars(select(self.model_class).order_by(self.model_class.id))

    async def count(self) -> int:
        query = select(self.model_class.id)
        return await self._scalar_one_or_none(select(func.count()).select_from(query.subquery()))

    async def delete(self, entity: ModelT) -> None:
        async with self._write("delete"):
            await self.session.delete(entity)
            await self._flush()
        logger.debug("entity_deleted", entity=self.model_class.__name__, id=entity.id)

    async def delete_by_id(self, entity_id: int) -> None:
        """Delete the entity if it exists; a missing id is not an error."""
        entity = await self.find_by_id(entity_id)
        if entity is None:
            return
        await self.delete(entity)
