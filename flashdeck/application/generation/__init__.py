"""
Generation bounded context - Application layer.

Contains the AI flashcard generation pipeline:
- Quota guard, input validation, generation recording, proposal assembly
- GenerateFlashcardsUseCase orchestrating them around the AI service
"""
