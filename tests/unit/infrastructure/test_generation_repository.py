"""Tests for GenerationRepository."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects import ContentHash, GenerationId, UserId
from flashdeck.domain.generation.entities import GenerationRecord
from flashdeck.infrastructure.generation.repositories.generation_repository import (
    GenerationRepository,
)
from flashdeck.models import Generation as GenerationORM


def _record(user_id: UserId, created_at: datetime) -> GenerationRecord:
    return GenerationRecord.create_with_id(
        id=GenerationId.generate(),
        user_id=user_id,
        model="gpt-4o-mini",
        source_text_length=1500,
        source_text_hash=ContentHash.compute("source"),
        generated_count=4,
        duration_ms=900,
        created_at=created_at,
    )


class TestGenerationRepository:
    def test_insert_round_trips_record(self, db_session: Session) -> None:
        repository = GenerationRepository(db_session)
        record = _record(UserId(uuid4()), datetime(2026, 10, 19, 9, 15, tzinfo=UTC))

        saved = repository.insert_generation_record(record)

        assert saved == record
        assert saved.user_id == record.user_id
        assert saved.source_text_hash == record.source_text_hash
        assert saved.duration_ms == 900
        assert saved.created_at == record.created_at

        orm = db_session.get(GenerationORM, str(record.id))
        assert orm is not None
        assert orm.generation_duration_ms == 900
        assert orm.source_text_length == 1500

    def test_count_since_only_counts_user_records_after_bound(self, db_session: Session) -> None:
        repository = GenerationRepository(db_session)
        user_id = UserId(uuid4())
        other_user_id = UserId(uuid4())
        midnight = datetime(2026, 10, 19, tzinfo=UTC)

        repository.insert_generation_record(_record(user_id, midnight - timedelta(minutes=1)))
        repository.insert_generation_record(_record(user_id, midnight))
        repository.insert_generation_record(_record(user_id, midnight + timedelta(hours=5)))
        repository.insert_generation_record(_record(other_user_id, midnight + timedelta(hours=1)))

        assert repository.count_generations_since(user_id, midnight) == 2
        assert repository.count_generations_since(other_user_id, midnight) == 1

    def test_count_without_records_is_zero(self, db_session: Session) -> None:
        repository = GenerationRepository(db_session)
        assert repository.count_generations_since(UserId(uuid4()), datetime.now(UTC)) == 0
