"""Pydantic DTOs (Data Transfer Objects) for the Actor feature."""

from pydantic import BaseModel, Field


class ActorCreate(BaseModel):
    """Schema for creating a new actor."""

    first_name: str = Field(..., min_length=1, max_length=45, examples=["John"])
    last_name: str = Field(..., min_length=1, max_length=45, examples=["Doe"])


class ActorUpdate(BaseModel):
    """Schema for updating an existing actor: all fields optional."""

    first_name: str | None = Field(None, min_length=1, max_length=45, examples=["Jane"])
    last_name: str | None = Field(None, min_length=1, max_length=45)


class ActorResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    first_name: str
    last_name: str

    model_config = {"from_attributes": True}
