"""Mapper for Generation ORM ↔ Domain conversion."""

from datetime import UTC

from flashdeck.domain.common.value_objects import ContentHash, GenerationId, UserId
from flashdeck.domain.generation.entities import GenerationRecord
from flashdeck.models import Generation as GenerationORM


class GenerationMapper:
    """Mapper for Generation ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GenerationORM) -> GenerationRecord:
        """Convert ORM model to domain entity."""
        created_at = orm_model.created_at
        # SQLite drops the timezone on the way back
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=UTC)

        return GenerationRecord.create_with_id(
            id=GenerationId.parse(orm_model.id),
            user_id=UserId.parse(orm_model.user_id),
            model=orm_model.model,
            source_text_length=orm_model.source_text_length,
            source_text_hash=ContentHash(orm_model.source_text_hash),
            generated_count=orm_model.generated_count,
            duration_ms=orm_model.generation_duration_ms,
            created_at=created_at,
        )

    def to_orm(self, domain_entity: GenerationRecord) -> GenerationORM:
        """Convert domain entity to a new ORM model."""
        return GenerationORM(
            id=domain_entity.id.to_primitive(),
            user_id=domain_entity.user_id.to_primitive(),
            model=domain_entity.model,
            source_text_length=domain_entity.source_text_length,
            source_text_hash=domain_entity.source_text_hash.value,
            generated_count=domain_entity.generated_count,
            generation_duration_ms=domain_entity.duration_ms,
            created_at=domain_entity.created_at,
        )
