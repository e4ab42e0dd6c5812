"""Widgets for the Flashcard App GUI."""

from .deck_editor_widget import DeckEditorWidget
from .deck_list_widget import DeckListWidget
from .results_widget import ResultsWidget
from .study_widget import StudyWidget

__all__ = ["DeckEditorWidget", "DeckListWidget", "ResultsWidget", "StudyWidget"]
