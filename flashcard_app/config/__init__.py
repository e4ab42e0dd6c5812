"""Configuration management for Flashcard App."""

from .config import FlashcardConfig
from .defaults import create_default_config

__all__ = ["FlashcardConfig", "create_default_config"]
