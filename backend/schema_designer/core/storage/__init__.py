"""Storage module."""

from schema_designer.core.storage.database import Base, Database

__all__ = ["Base", "Database"]
