"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model for stored documents and API payloads.

    Python code uses snake_case attributes; the JSON wire format and the
    documents kept in the key-value store use camelCase keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_document(self) -> dict:
        """Serialize for storage (camelCase keys, JSON-safe values)."""
        return self.model_dump(mode="json", by_alias=True)


class SuccessResponse(CamelModel):
    """Acknowledgement for operations with no other payload."""

    success: bool = True
