"""
Job API endpoints.

Routes: GET /jobs/{job_id}/status, GET /jobs/{job_id}/result

Dependencies: optimizer_jobs.application.services.job_service
System role: Job status HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException

from optimizer_jobs.api.deps import get_job_service
from optimizer_jobs.application.services.job_service import JobService
from optimizer_jobs.core.exceptions import JobNotFoundError, ResultStoreError

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("/{job_id}/status")
def get_job_status(
    job_id: str,
    job_service: JobService = Depends(get_job_service),
) -> dict:
    """
    Get job status and progress for polling.

    Poll every few seconds while status is running; stop once it is
    completed or failed and fetch the result.

    Example Response:
        {
            "job_id": "3f2a9c",
            "status": "running",
            "progress": 45,
            "message": "Optimizing... 45% complete",
            "updated_at": "2025-01-01T12:00:05+00:00"
        }

    Raises:
        HTTPException(404): No status written for this job
        HTTPException(503): Result store unavailable
    """
    try:
        return job_service.get_job_status(job_id)
    except JobNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ResultStoreError as e:
        raise HTTPException(status_code=503, detail=e.message)


@router.get("/{job_id}/result")
def get_job_result(
    job_id: str,
    job_service: JobService = Depends(get_job_service),
) -> dict:
    """
    Get the terminal result of a job.

    On success the body carries ``payload`` and ``metrics``; on failure
    ``error`` and ``error_kind``. Results expire after their TTL.

    Raises:
        HTTPException(404): Job not finished or result expired
        HTTPException(503): Result store unavailable
    """
    try:
        return job_service.get_job_result(job_id)
    except JobNotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ResultStoreError as e:
        raise HTTPException(status_code=503, detail=e.message)
