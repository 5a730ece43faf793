"""Service catalog endpoint."""

from typing import List

from fastapi import APIRouter

from cybershield.schemas.catalog import ServiceDescriptor
from cybershield.services.catalog import list_services


router = APIRouter(tags=["services"])


@router.get("/services", response_model=List[ServiceDescriptor])
async def get_services() -> List[ServiceDescriptor]:
    """List all consulting services in display order."""
    return list_services()
