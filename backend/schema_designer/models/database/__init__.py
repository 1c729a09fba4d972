"""Database models."""

from schema_designer.models.database.project import Project

__all__ = ["Project"]
