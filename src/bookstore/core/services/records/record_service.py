"""Record operations with explicit not-found / invalid / failed outcomes."""

from typing import Any, Generic, TypeVar

from loguru import logger

from src.bookstore.core.models.results import OperationResult
from src.bookstore.entities.core._base import RecordEntity
from src.bookstore.entities.core.repository import Repository

EntityT = TypeVar("EntityT", bound=RecordEntity)

# Largest key a 64-bit integer primary key can hold
MAX_RECORD_ID = 2**63 - 1


class RecordService(Generic[EntityT]):
    """CRUD over one repository, reporting expected conditions as results.

    Validation and existence checks run before any mutation reaches the
    store. Store faults other than a rejected commit propagate as
    ``StoreUnavailableError``.
    """

    def __init__(self, repository: Repository[EntityT, Any]) -> None:
        self._repository = repository
        self._name = repository.entity_type.__name__

    def list_all(self) -> OperationResult[list[EntityT]]:
        logger.info("{}: list attempted", self._name)
        records = self._repository.find_all()
        logger.info("{}: listed {} records", self._name, len(records))
        return OperationResult.ok(records)

    def get(self, record_id: int) -> OperationResult[EntityT]:
        logger.info("{}: get attempted for id {}", self._name, record_id)
        if record_id > MAX_RECORD_ID:
            logger.warning("{} with id {} was not found", self._name, record_id)
            return OperationResult.not_found(f"{self._name} {record_id} not found")

        record = self._repository.find_by_id(record_id)
        if record is None:
            logger.warning("{} with id {} was not found", self._name, record_id)
            return OperationResult.not_found(f"{self._name} {record_id} not found")
        return OperationResult.ok(record)

    def create(self, entity: EntityT) -> OperationResult[EntityT]:
        logger.info("{}: create attempted", self._name)
        entity.id = None
        result = self._repository.create(entity)
        if not result.is_committed:
            logger.warning("{} creation failed ({})", self._name, result.status.value)
            return OperationResult.failed(f"{self._name} creation failed")

        logger.info("{} created with id {}", self._name, entity.id)
        return OperationResult.ok(entity)

    def update(self, record_id: int, entity: EntityT) -> OperationResult[EntityT]:
        logger.info("{}: update attempted for id {}", self._name, record_id)
        if record_id < 1 or entity.id != record_id:
            logger.warning("{} update rejected: id {} does not match body", self._name, record_id)
            return OperationResult.invalid("Route id and record id must match")

        if record_id > MAX_RECORD_ID or not self._repository.exists(record_id):
            logger.warning("{} with id {} was not found", self._name, record_id)
            return OperationResult.not_found(f"{self._name} {record_id} not found")

        result = self._repository.update(entity)
        if result.is_failed:
            logger.warning("{} update failed for id {}", self._name, record_id)
            return OperationResult.failed(f"{self._name} update failed")

        if result.is_noop:
            logger.info("{} {} unchanged", self._name, record_id)
        else:
            logger.info("{} {} updated", self._name, record_id)
        return OperationResult.ok(entity)

    def delete(self, record_id: int) -> OperationResult[None]:
        logger.info("{}: delete attempted for id {}", self._name, record_id)
        if record_id < 1:
            logger.warning("{} delete rejected: invalid id {}", self._name, record_id)
            return OperationResult.invalid("Id must be positive")

        if record_id > MAX_RECORD_ID or not self._repository.exists(record_id):
            logger.warning("{} with id {} was not found", self._name, record_id)
            return OperationResult.not_found(f"{self._name} {record_id} not found")

        record = self._repository.find_by_id(record_id)
        if record is None:
            # Removed between the probe and the load.
            return OperationResult.not_found(f"{self._name} {record_id} not found")

        result = self._repository.delete(record)
        if not result.is_committed:
            logger.warning("{} delete failed for id {}", self._name, record_id)
            return OperationResult.failed(f"{self._name} delete failed")

        logger.info("{} {} deleted", self._name, record_id)
        return OperationResult.ok()
