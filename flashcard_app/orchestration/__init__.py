"""Orchestration processors for coordinating services."""

from .study_runner import StudyRunner

__all__ = ["StudyRunner"]
