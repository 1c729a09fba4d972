"""Request dependencies and capability guards.

Each guard checks once per request that its collaborator is usable and
raises a typed error otherwise; handlers receive ready-to-use services.
"""

from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from schema_designer.core.config import Settings
from schema_designer.core.errors import ConfigMissing, StoreUnavailable
from schema_designer.core.llm import LLMProvider
from schema_designer.core.storage import Database
from schema_designer.services import ProjectStore, SchemaDesignAssistant


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_database(request: Request) -> Database:
    """Guard: the store connection must be established."""
    database: Database | None = getattr(request.app.state, "database", None)
    if database is None or not database.is_connected:
        raise StoreUnavailable()
    return database


async def get_db(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    """Get a database session for the request."""
    async with database.session() as session:
        yield session


def get_project_store(db: AsyncSession = Depends(get_db)) -> ProjectStore:
    return ProjectStore(db)


def get_llm_provider(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> LLMProvider:
    """Guard: a credential must be configured and the client built."""
    if not settings.gemini_api_key:
        raise ConfigMissing()

    llm: LLMProvider | None = getattr(request.app.state, "llm_provider", None)
    if llm is None:
        raise ConfigMissing("Gemini client is not initialized. Please check your API key.")
    return llm


def get_schema_assistant(llm: LLMProvider = Depends(get_llm_provider)) -> SchemaDesignAssistant:
    return SchemaDesignAssistant(llm)
