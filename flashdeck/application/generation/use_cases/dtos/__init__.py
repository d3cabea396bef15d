"""DTOs for generation use cases."""

from flashdeck.application.generation.use_cases.dtos.generation_dtos import GenerationResult

__all__ = ["GenerationResult"]
