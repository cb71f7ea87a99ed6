"""API routers."""

from . import decks, flashcards, root, study_groups, users

__all__ = ["decks", "flashcards", "root", "study_groups", "users"]
