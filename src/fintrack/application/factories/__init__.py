"""Factories used by commands and queries to reach their collaborators."""

from fintrack.application.factories.repository_factory import RepositoryFactory

__all__ = ["RepositoryFactory"]
