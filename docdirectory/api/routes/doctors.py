"""
Doctor listing and profile API routes.
"""
from fastapi import APIRouter, Depends, HTTPException, Response

from docdirectory.api.deps import get_search_service
from docdirectory.api.schemas import DoctorsResponse
from docdirectory.core.constants import PUBLIC_CACHE_CONTROL
from docdirectory.core.models import Doctor
from docdirectory.services.search import DirectorySearchService

router = APIRouter()


@router.get("/doctors", response_model=DoctorsResponse)
def list_doctors(
    response: Response,
    service: DirectorySearchService = Depends(get_search_service),
):
    """
    List every doctor in the public directory.

    The listing is the full collection; clients search and filter it locally
    or through /api/search.
    """
    doctors = service.list_doctors()
    response.headers["Cache-Control"] = PUBLIC_CACHE_CONTROL
    return DoctorsResponse(doctors=doctors, total=len(doctors))


@router.get("/doctors/slug/{slug}", response_model=Doctor)
def get_doctor_by_slug(
    slug: str,
    service: DirectorySearchService = Depends(get_search_service),
):
    """Get a doctor profile by its URL slug."""
    doctor = service.get_doctor_by_slug(slug)
    if not doctor:
        raise HTTPException(status_code=404, detail="Doctor not found")
    return doctor


@router.get("/doctors/{doctor_id}", response_model=Doctor)
def get_doctor(
    doctor_id: str,
    service: DirectorySearchService = Depends(get_search_service),
):
    """Get a doctor profile by id."""
    doctor = service.get_doctor(doctor_id)
    if not doctor:
        raise HTTPException(status_code=404, detail="Doctor not found")
    return doctor
