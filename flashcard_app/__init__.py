"""
Flashcard App - Desktop Flashcard Study Tool

Build decks of front/back cards, study them in adaptive rounds that
requeue missed cards, and look up word translations with local caching.
"""

__version__ = "1.0.0"
__author__ = "Flashcard App Contributors"
