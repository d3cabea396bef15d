"""Tests for GenerateFlashcardsUseCase."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from flashdeck.application.generation.exceptions import (
    DailyLimitExceededError,
    InvalidCountError,
    ServiceUnavailableError,
    TextTooLongError,
    TextTooShortError,
)
from flashdeck.application.generation.services.generation_recorder import GenerationRecorder
from flashdeck.application.generation.services.quota_guard import QuotaGuard
from flashdeck.application.generation.use_cases import generate_flashcards_use_case
from flashdeck.application.generation.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.generation.entities import AIFlashcard
from flashdeck.domain.generation.enums import FlashcardKind, FlashcardSource

SOURCE_TEXT = "Mitochondria are the powerhouse of the cell. " * 30


def _flashcards(count: int) -> list[AIFlashcard]:
    return [
        AIFlashcard(
            kind=FlashcardKind.QUESTION_ANSWER if i % 2 == 0 else FlashcardKind.GAPS,
            front=f"Question {i}",
            back=f"Answer {i}",
        )
        for i in range(count)
    ]


@pytest.fixture
def repository() -> MagicMock:
    repository = MagicMock()
    repository.count_generations_since.return_value = 0
    repository.insert_generation_record.side_effect = lambda record: record
    return repository


@pytest.fixture
def ai_service() -> MagicMock:
    service = MagicMock()
    service.model_name = "gpt-4o-mini"
    service.generate_flashcards = AsyncMock(return_value=[])
    return service


@pytest.fixture
def use_case(repository: MagicMock, ai_service: MagicMock) -> GenerateFlashcardsUseCase:
    return GenerateFlashcardsUseCase(
        quota_guard=QuotaGuard(repository, daily_limit=10),
        ai_flashcard_service=ai_service,
        generation_recorder=GenerationRecorder(repository),
    )


class TestGenerateFlashcardsUseCase:
    @pytest.mark.asyncio
    async def test_returns_requested_number_of_proposals(
        self, use_case: GenerateFlashcardsUseCase, ai_service: MagicMock, repository: MagicMock
    ) -> None:
        ai_service.generate_flashcards.return_value = _flashcards(5)
        deck_id = DeckId(uuid4())

        result = await use_case.generate(UserId(uuid4()), deck_id, SOURCE_TEXT, 5)

        assert result.generated_count == 5
        assert len(result.proposals) == 5
        assert all(p.accepted is False for p in result.proposals)
        assert all(p.source == FlashcardSource.AI_FULL for p in result.proposals)
        assert all(p.deck_id == deck_id for p in result.proposals)
        assert [p.front for p in result.proposals] == [f"Question {i}" for i in range(5)]
        ai_service.generate_flashcards.assert_awaited_once_with(SOURCE_TEXT, 5)

        record = repository.insert_generation_record.call_args.args[0]
        assert result.generation_id == record.id
        assert result.generation_id_str == str(record.id)
        assert result.created_at == record.created_at
        assert all(p.generation_id == record.id for p in result.proposals)
        assert record.generated_count == 5
        assert record.model == "gpt-4o-mini"
        assert record.source_text_length == len(SOURCE_TEXT)

    @pytest.mark.asyncio
    async def test_daily_limit_short_circuits_before_llm_call(
        self, use_case: GenerateFlashcardsUseCase, ai_service: MagicMock, repository: MagicMock
    ) -> None:
        repository.count_generations_since.return_value = 10

        with pytest.raises(DailyLimitExceededError):
            await use_case.generate(UserId(uuid4()), DeckId(uuid4()), SOURCE_TEXT, 5)

        ai_service.generate_flashcards.assert_not_awaited()
        repository.insert_generation_record.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("source_text", "count", "error_type", "fragment"),
        [
            ("x" * 999, 5, TextTooShortError, "999 chars"),
            ("x" * 10001, 5, TextTooLongError, "10001 chars"),
            ("x" * 1000, 101, InvalidCountError, "101"),
        ],
    )
    async def test_invalid_input_never_reaches_llm(
        self,
        use_case: GenerateFlashcardsUseCase,
        ai_service: MagicMock,
        source_text: str,
        count: int,
        error_type: type[Exception],
        fragment: str,
    ) -> None:
        with pytest.raises(error_type, match=fragment) as exc_info:
            await use_case.generate(UserId(uuid4()), DeckId(uuid4()), source_text, count)

        assert exc_info.value.status_code == 400
        ai_service.generate_flashcards.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_recording_failure_keeps_proposals(
        self, use_case: GenerateFlashcardsUseCase, ai_service: MagicMock, repository: MagicMock
    ) -> None:
        ai_service.generate_flashcards.return_value = _flashcards(3)
        repository.insert_generation_record.side_effect = RuntimeError("database is locked")

        result = await use_case.generate(UserId(uuid4()), DeckId(uuid4()), SOURCE_TEXT, 3)

        assert len(result.proposals) == 3
        assert result.generation_id is None
        assert result.generation_id_str == ""
        assert all(p.generation_id is None for p in result.proposals)
        assert result.created_at.tzinfo is not None

    @pytest.mark.asyncio
    async def test_empty_result_from_service_is_not_an_error(
        self, use_case: GenerateFlashcardsUseCase, ai_service: MagicMock, repository: MagicMock
    ) -> None:
        ai_service.generate_flashcards.return_value = []

        result = await use_case.generate(UserId(uuid4()), DeckId(uuid4()), SOURCE_TEXT, 5)

        assert result.generated_count == 0
        assert result.proposals == []
        record = repository.insert_generation_record.call_args.args[0]
        assert record.generated_count == 0

    @pytest.mark.asyncio
    async def test_llm_failure_is_not_recorded(
        self, use_case: GenerateFlashcardsUseCase, ai_service: MagicMock, repository: MagicMock
    ) -> None:
        ai_service.generate_flashcards.side_effect = ServiceUnavailableError()

        with pytest.raises(ServiceUnavailableError):
            await use_case.generate(UserId(uuid4()), DeckId(uuid4()), SOURCE_TEXT, 5)

        repository.insert_generation_record.assert_not_called()

    @pytest.mark.asyncio
    async def test_count_defaults_from_text_length(
        self, use_case: GenerateFlashcardsUseCase, ai_service: MagicMock
    ) -> None:
        await use_case.generate(UserId(uuid4()), DeckId(uuid4()), "x" * 1000)

        ai_service.generate_flashcards.assert_awaited_once_with("x" * 1000, 10)

    @pytest.mark.asyncio
    async def test_blank_model_name_keeps_proposals(
        self, use_case: GenerateFlashcardsUseCase, ai_service: MagicMock, repository: MagicMock
    ) -> None:
        ai_service.model_name = "  "
        ai_service.generate_flashcards.return_value = _flashcards(1)

        result = await use_case.generate(UserId(uuid4()), DeckId(uuid4()), SOURCE_TEXT, 1)

        assert len(result.proposals) == 1
        assert result.generation_id is None
        repository.insert_generation_record.assert_not_called()

    @pytest.mark.asyncio
    async def test_duration_spans_quota_check_and_llm_call(
        self,
        use_case: GenerateFlashcardsUseCase,
        ai_service: MagicMock,
        repository: MagicMock,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        now = [100.0]
        clock = MagicMock()
        clock.monotonic.side_effect = lambda: now[0]
        monkeypatch.setattr(generate_flashcards_use_case, "time", clock)

        def slow_count(user_id: UserId, since: object) -> int:
            now[0] += 0.25
            return 0

        async def slow_generate(source_text: str, count: int) -> list[AIFlashcard]:
            now[0] += 1.5
            return _flashcards(2)

        repository.count_generations_since.side_effect = slow_count
        ai_service.generate_flashcards.side_effect = slow_generate

        await use_case.generate(UserId(uuid4()), DeckId(uuid4()), SOURCE_TEXT, 2)

        record = repository.insert_generation_record.call_args.args[0]
        assert record.duration_ms == 1750
