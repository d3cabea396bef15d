"""Repository for GenerationRecord domain entities."""

from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import UserId
from flashdeck.domain.generation.entities import GenerationRecord
from flashdeck.infrastructure.generation.mappers.generation_mapper import GenerationMapper
from flashdeck.models import Generation as GenerationORM


class GenerationRepository:
    """Repository for GenerationRecord domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GenerationMapper()

    def insert_generation_record(self, record: GenerationRecord) -> GenerationRecord:
        """
        Insert a new generation record.

        Args:
            record: The record to persist

        Returns:
            The persisted record
        """
        orm_model = self.mapper.to_orm(record)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def count_generations_since(self, user_id: UserId, since: datetime) -> int:
        """
        Count a user's generation records created at or after a moment.

        Args:
            user_id: The user whose records are counted
            since: Lower bound on created_at, inclusive

        Returns:
            Number of matching records
        """
        stmt = select(func.count(GenerationORM.id)).where(
            GenerationORM.user_id == user_id.to_primitive(),
            GenerationORM.created_at >= since,
        )
        return self.db.execute(stmt).scalar() or 0
