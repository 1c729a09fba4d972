"""Error types surfaced to API callers."""

from fastapi import status


class SchemaDesignerError(Exception):
    """Base error carrying the HTTP status and message returned to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigMissing(SchemaDesignerError):
    """A required credential or connection string is not configured."""

    default_message = (
        "Gemini API key is missing. Please set the GEMINI_API_KEY environment variable."
    )


class UpstreamError(SchemaDesignerError):
    """The language-model call failed, timed out or returned nothing."""

    default_message = "An error occurred while generating the response"


class StoreUnavailable(SchemaDesignerError):
    """No live connection to the project store."""

    default_message = "Database connection not available"


class NotFound(SchemaDesignerError):
    """Lookup by project id matched nothing."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Project not found"


class WriteError(SchemaDesignerError):
    """Insert or update was rejected by the store."""

    default_message = "Failed to write project"
