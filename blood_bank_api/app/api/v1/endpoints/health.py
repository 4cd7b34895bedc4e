"""Health endpoint for API v1."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from blood_bank_api.app.core.config import settings
from blood_bank_api.app.services.bloodbank_service import BloodBankService, get_bloodbank_service

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health(service: BloodBankService = Depends(get_bloodbank_service)) -> Dict[str, Any]:
    """Return the service name, version and number of stored entries."""
    return {
        "project": settings.project_name,
        "version": settings.api_version,
        "entries": len(service.store),
    }
