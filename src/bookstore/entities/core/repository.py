"""Generic repository over a domain entity and its table model."""

from typing import ClassVar, Generic, TypeVar

from loguru import logger
from sqlalchemy import exists
from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError
from sqlmodel import Session, SQLModel, select

from src.bookstore.core.exceptions import StoreUnavailableError
from src.bookstore.core.models.results import SaveResult
from src.bookstore.entities.core._base import RecordEntity

EntityT = TypeVar("EntityT", bound=RecordEntity)
TableT = TypeVar("TableT", bound=SQLModel)


class Repository(Generic[EntityT, TableT]):
    """Uniform persistence protocol for one record type.

    Subclasses only name the entity and table classes. The repository keeps
    no state other than the session it was given, so it is cheap to create
    one per request. Reads return domain entities, never table rows.
    """

    entity_type: ClassVar[type[RecordEntity]]
    table_type: ClassVar[type[SQLModel]]

    def __init__(self, session: Session) -> None:
        self._session = session

    # ---------------- reads ----------------
    def find_all(self) -> list[EntityT]:
        statement = select(self.table_type).order_by(self.table_type.id)
        rows = self._run(lambda: self._session.exec(statement).all())
        return [self._to_entity(row) for row in rows]

    def find_by_id(self, record_id: int) -> EntityT | None:
        row = self._run(lambda: self._session.get(self.table_type, record_id))
        if row is None:
            return None
        return self._to_entity(row)

    def exists(self, record_id: int) -> bool:
        """Existence probe that does not load the row."""
        statement = select(exists().where(self.table_type.id == record_id))
        return bool(self._run(lambda: self._session.exec(statement).one()))

    # ---------------- writes ----------------
    def create(self, entity: EntityT) -> SaveResult:
        row = self.table_type.model_validate(entity.model_dump(exclude={"id"}))
        self._session.add(row)
        result = self.save()
        if result.is_committed:
            # Mirror the store-assigned key back onto the caller's entity.
            entity.id = row.id
        return result

    def update(self, entity: EntityT) -> SaveResult:
        row = self._run(lambda: self._session.get(self.table_type, entity.id))
        if row is None:
            return SaveResult.failed(LookupError(f"{self._name} {entity.id} not found"))
        for field, value in entity.model_dump(exclude={"id"}).items():
            setattr(row, field, value)
        return self.save()

    def delete(self, entity: EntityT) -> SaveResult:
        row = self._run(lambda: self._session.get(self.table_type, entity.id))
        if row is None:
            return SaveResult.failed(LookupError(f"{self._name} {entity.id} not found"))
        self._stage_delete(row)
        return self.save()

    def save(self) -> SaveResult:
        """Commit everything staged on the session as one transaction."""
        session = self._session
        pending = (
            len(session.new)
            + len(session.deleted)
            + sum(1 for obj in session.dirty if session.is_modified(obj))
        )
        try:
            session.commit()
        except IntegrityError as exc:
            session.rollback()
            logger.warning("{} commit rejected by the store: {}", self._name, exc.orig)
            return SaveResult.failed(exc)
        except (OperationalError, DBAPIError) as exc:
            session.rollback()
            logger.error("{} commit failed: {}", self._name, type(exc).__name__)
            raise StoreUnavailableError(f"Store unavailable while saving {self._name}") from exc

        if pending == 0:
            return SaveResult.noop()
        return SaveResult.committed(pending)

    # ---------------- helpers ----------------
    def _stage_delete(self, row: TableT) -> None:
        self._session.delete(row)

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)

    @property
    def _name(self) -> str:
        return self.entity_type.__name__

    def _run(self, operation):
        try:
            return operation()
        except OperationalError as exc:
            self._session.rollback()
            raise StoreUnavailableError(f"Store unavailable while reading {self._name}") from exc
