"""Request-scoped services."""

from schema_designer.services.project_store import ProjectStore
from schema_designer.services.schema_assistant import SchemaDesignAssistant

__all__ = ["ProjectStore", "SchemaDesignAssistant"]
