"""Project database model."""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, String

from schema_designer.core.storage.database import Base


def new_project_id() -> str:
    """Mint an opaque public project id."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Project(Base):
    """Project document: a name, a generated schema and its conversation."""

    __tablename__ = "projects"

    # Internal row key, never exposed
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), nullable=False, unique=True, index=True, default=new_project_id)
    name = Column(String(255), nullable=False)
    db_schema = Column("schema", JSON, nullable=True)
    schema_type = Column(String(50), nullable=False)
    conversation = Column(JSON, default=list, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
