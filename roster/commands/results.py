"""Command result models."""

from pydantic import BaseModel, ConfigDict, Field

from roster.contacts.models import Contact


class CommandResult(BaseModel):
    """Outcome of a successful command."""

    model_config = ConfigDict(frozen=True)

    feedback_to_user: str = Field(..., description="Confirmation message to display")
    contact: Contact | None = Field(default=None, description="Contact the command produced")
