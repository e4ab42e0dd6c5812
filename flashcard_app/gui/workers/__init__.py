"""Background worker threads for the GUI."""

from .lookup_worker import LookupWorker

__all__ = ["LookupWorker"]
