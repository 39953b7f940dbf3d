"""
GenerationResult - Pydantic Schemas

Describe the requirements document returned by POST /api/generate.
Provider replies are validated structurally (see response_validator) and
returned as-is; these models define the mock templates and the OpenAPI docs.
"""

from typing import List

from pydantic import BaseModel, Field


class Entity(BaseModel):
    """A data entity of the generated app."""
    name: str = Field(..., description="Entity name, e.g. User, Product")
    attributes: List[str] = Field(default_factory=list)


class UserRole(BaseModel):
    """A user role and what it may do."""
    name: str
    description: str


class Feature(BaseModel):
    """A feature of the generated app."""
    name: str
    description: str


class GenerationResult(BaseModel):
    """Structured requirements extracted from a free-text description."""

    appName: str = Field(..., min_length=1)
    entities: List[Entity] = Field(..., min_length=1)
    userRoles: List[UserRole] = Field(..., min_length=1)
    features: List[Feature] = Field(..., min_length=1)

    class Config:
        """Pydantic config."""
        frozen = True

