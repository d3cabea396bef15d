"""
Application constants.

This module contains constants used throughout the application.
"""

from uuid import UUID

# TODO: Remove DEFAULT_USER_ID when authentication is implemented.
# Single-user mode: the generations router resolves every caller to this id.
DEFAULT_USER_ID = UUID("00000000-0000-4000-8000-000000000001")

# Source text bounds (character count)
SOURCE_TEXT_MIN_LENGTH = 1000
SOURCE_TEXT_MAX_LENGTH = 10000

# Requested flashcard count bounds
MIN_FLASHCARD_COUNT = 1
MAX_FLASHCARD_COUNT = 100

# Flashcard side ceilings
FLASHCARD_FRONT_MAX_LENGTH = 200
FLASHCARD_BACK_MAX_LENGTH = 500
