"""flashdeck: AI-assisted flashcard generation backend."""
