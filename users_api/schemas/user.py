"""User Schemas: Pydantic models for the /users request and response bodies.

Invariants:
    - Request fields are optional at the schema level; required-field rules
      live in UserService so the API can answer with its own messages
    - Non-string field values are rejected by Pydantic (400 Invalid request data)
    - Unknown request fields are ignored
"""

from pydantic import BaseModel


class UserCreate(BaseModel):
    """POST /users body."""
    name: str | None = None
    email: str | None = None


class UserUpdate(BaseModel):
    """PUT /users/{id} body: any subset of the user's fields."""
    name: str | None = None
    email: str | None = None


class UserResponse(BaseModel):
    """A stored user."""
    id: int
    name: str
    email: str


class UserUpdateResponse(BaseModel):
    """Echo of an applied update; fields that were not submitted are omitted."""
    id: int
    name: str | None = None
    email: str | None = None


class MessageResponse(BaseModel):
    message: str
