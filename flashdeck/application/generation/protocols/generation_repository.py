from datetime import datetime
from typing import Protocol

from flashdeck.domain.common.value_objects import UserId
from flashdeck.domain.generation.entities import GenerationRecord


class GenerationRepositoryProtocol(Protocol):
    def insert_generation_record(self, record: GenerationRecord) -> GenerationRecord: ...

    def count_generations_since(self, user_id: UserId, since: datetime) -> int: ...
