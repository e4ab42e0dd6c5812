"""Worker thread for dictionary lookups."""

from PyQt6.QtCore import QThread, pyqtSignal

from flashcard_app.interfaces import DictionaryProvider


class LookupWorker(QThread):
    """Look up one word in the background.

    Emits result_ready with the WordLookupResult, or error with a message
    if the provider raised.
    """

    result_ready = pyqtSignal(object)  # WordLookupResult
    error = pyqtSignal(str)

    def __init__(self, provider: DictionaryProvider, word: str, parent=None):
        """Initialize the lookup worker.

        Args:
            provider: Lookup backend
            word: Word to look up
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.provider = provider
        self.word = word

    def run(self) -> None:
        """Execute the lookup in the background thread."""
        try:
            result = self.provider.lookup(self.word)
        except Exception as e:
            self.error.emit(f"Lookup failed: {e}")
            return
        self.result_ready.emit(result)
