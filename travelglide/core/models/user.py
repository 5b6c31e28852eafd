"""
User-related data models.
"""

from pydantic import BaseModel, ConfigDict


class User(BaseModel):
    """Signed-in user as supplied by the auth gate."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    email: str
    name: str
