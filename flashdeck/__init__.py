"""flashdeck: REST API for flashcard study groups."""
