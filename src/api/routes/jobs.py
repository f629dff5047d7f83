"""Job listing and live search routes."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_job_repo, get_job_source
from api.models import JobResponse, JobSearchRequest
from port.job_repository import JobRepository
from port.job_source import JobSourceError, JobSourcePort
from services.input_guard import generic_error_message

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("", response_model=list[JobResponse])
async def list_jobs(repo: JobRepository = Depends(get_job_repo)):
    """List stored jobs, newest first."""
    try:
        jobs = repo.list_jobs()
    except Exception as e:
        logger.error("Error retrieving jobs", extra={"error": str(e)}, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=generic_error_message("retrieving jobs"),
        )
    return [JobResponse(**asdict(job)) for job in jobs]


@router.post("/search", response_model=list[JobResponse])
async def search_jobs(
    request: JobSearchRequest,
    source: JobSourcePort = Depends(get_job_source),
):
    """Run a live search against the job provider without storing results."""
    if not request.keywords.strip() or not request.location.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="keywords and location are required")

    try:
        jobs = await source.search(request.keywords.strip(), request.location.strip())
    except JobSourceError as e:
        logger.warning("Job search failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=generic_error_message("searching jobs"),
        )
    return [JobResponse(**asdict(job)) for job in jobs]


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, repo: JobRepository = Depends(get_job_repo)):
    try:
        job = repo.get_by_id(job_id)
    except Exception as e:
        logger.error("Error retrieving job", extra={"jobId": job_id, "error": str(e)}, exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=generic_error_message("retrieving the job"),
        )

    if not job:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Job with ID {job_id} not found.")
    return JobResponse(**asdict(job))
