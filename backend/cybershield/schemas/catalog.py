"""Pydantic schemas for the service catalog."""

from typing import List

from pydantic import BaseModel, Field


class ServiceDescriptor(BaseModel):
    """One consulting service offered on the site."""

    id: int = Field(..., description="Stable position in the catalog, starting at 1")
    name: str
    description: str
    icon: str = Field(..., description="Font Awesome icon name used by the frontend")
    features: List[str] = Field(default_factory=list)
