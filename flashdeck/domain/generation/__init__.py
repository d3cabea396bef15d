"""
Generation bounded context - Domain layer.

This context covers AI-assisted flashcard generation:
- AIFlashcard: a validated card as produced by the language model
- GenerationRecord: analytics/audit row for one generation run
- FlashcardProposal: an unaccepted card handed back to the caller
"""
