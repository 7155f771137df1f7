"""Generic SQLAlchemy repository.

One ``Repository`` is instantiated per table. It implements the operations
every resource shares: create, find-one, find-by-id, filtered paginated
listing and partial update. Unique constraints declared on the model are
the authoritative duplicate check; their violations surface as
``ConflictError``.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Tuple, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jurnal_digital.core.exceptions import ConflictError, NotFoundError
from jurnal_digital.models.base import Base, utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Typed access to one table."""

    def __init__(
        self,
        db: Session,
        model: Type[ModelT],
        not_found_message: str = "Data tidak ditemukan",
        conflict_message: str = "Data sudah ada",
    ):
        """Initialize Repository.

        Args:
            db: SQLAlchemy Session.
            model: Mapped model class.
            not_found_message: Message for ``NotFoundError``.
            conflict_message: Message for ``ConflictError`` raised on a
                unique constraint violation.
        """
        self.db = db
        self.model = model
        self.not_found_message = not_found_message
        self.conflict_message = conflict_message

    def create(self, entity: ModelT, conflict_error: Type[ConflictError] = ConflictError) -> str:
        """Insert a new record and return its generated id.

        Raises:
            ConflictError: If a unique constraint rejects the record.
        """
        self.db.add(entity)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.info("Unique constraint rejected %s insert: %s", self.model.__tablename__, e.orig)
            raise conflict_error(self.conflict_message) from e
        self.db.refresh(entity)
        return entity.id

    def find_one(self, *criteria: Any) -> Optional[ModelT]:
        return self.db.scalars(select(self.model).where(*criteria).limit(1)).first()

    def find_by_id(self, record_id: str) -> ModelT:
        """Get a record by id.

        Raises:
            NotFoundError: If no record has this id.
        """
        entity = self.db.get(self.model, record_id)
        if entity is None:
            raise NotFoundError(self.not_found_message)
        return entity

    def list(
        self,
        filters: Sequence[Any] = (),
        order_by: Sequence[Any] = (),
        page: int = 1,
        limit: int = 10,
    ) -> Tuple[List[ModelT], int]:
        """List records matching ``filters``, one page at a time.

        Args:
            filters: SQLAlchemy boolean clauses, combined with AND.
            order_by: Sort clauses.
            page: 1-based page number.
            limit: Page size.

        Returns:
            ``(items, total)`` where ``total`` counts every matching record.
        """
        skip = (page - 1) * limit
        total = self.db.scalar(
            select(func.count()).select_from(self.model).where(*filters)
        )
        items = self.db.scalars(
            select(self.model).where(*filters).order_by(*order_by).offset(skip).limit(limit)
        ).all()
        return list(items), total or 0

    def update_partial(self, record_id: str, patch: Dict[str, Any]) -> None:
        """Set only the given fields and refresh ``updated_at``.

        Raises:
            NotFoundError: If no record has this id.
            ConflictError: If the change violates a unique constraint.
        """
        entity = self.find_by_id(record_id)
        for field, value in patch.items():
            setattr(entity, field, value)
        entity.updated_at = utcnow()
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictError(self.conflict_message) from e
