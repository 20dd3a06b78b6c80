from typing import Any, Dict, Union

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.orm import Session

from jobboard.core.exceptions import BadRequestError
from jobboard.database import get_db
from jobboard.repositories.job import JobRepository
from jobboard.routers.auth_deps import ensure_admin
from jobboard.schemas.job import (
    DeletedEnvelope,
    JobDetailEnvelope,
    JobEnvelope,
    JobListEnvelope,
    JobNew,
    JobSearch,
    JobUpdate,
)
from jobboard.schemas.validator import validate

router = APIRouter(
    prefix="/jobs",
    tags=["Jobs"],
)


def get_job_repository(db: Session = Depends(get_db)) -> JobRepository:
    return JobRepository(db)


def _to_number(value: str) -> Union[int, float, str]:
    # Unparseable text is passed through so schema validation reports it
    try:
        return int(value)
    except ValueError:
        pass
    try:
        return float(value)
    except ValueError:
        return value


def coerce_search_query(params) -> Dict[str, Any]:
    """
    Query strings are all text: minSalary becomes a number and hasEquity is
    True only for the literal "true".
    """
    q: Dict[str, Any] = dict(params)
    if "minSalary" in q:
        q["minSalary"] = _to_number(q["minSalary"])
    q["hasEquity"] = q.get("hasEquity") == "true"
    return q


@router.post("", response_model=JobEnvelope, status_code=status.HTTP_201_CREATED,
             dependencies=[Depends(ensure_admin)])
def create_job(
    body: Dict[str, Any] = Body(...),
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    Create a job from { title, salary, equity, companyHandle }.

    Returns { job: { id, title, salary, equity, companyHandle } }
    Authorization required: admin
    """
    result = validate(body, JobNew)
    if not result.valid:
        raise BadRequestError(result.errors)

    job = jobs.create(result.instance.model_dump(by_alias=True))
    return {"job": job}


@router.get("", response_model=JobListEnvelope)
def list_jobs(
    request: Request,
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    Returns { jobs: [ { id, title, salary, equity, companyHandle, companyName }, ... ] }

    Optional query filters:
    - minSalary
    - hasEquity (true returns only jobs with equity > 0, other values ignored)
    - title (case-insensitive, partial match)

    Authorization required: none
    """
    q = coerce_search_query(request.query_params)
    result = validate(q, JobSearch)
    if not result.valid:
        raise BadRequestError(result.errors)

    filters = result.instance.model_dump(by_alias=True, exclude_none=True)
    return {"jobs": jobs.find_all(filters)}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, jobs: JobRepository = Depends(get_job_repository)):
    """
    Returns { job: { id, title, salary, equity, company } }
      where company is { handle, name, description, numEmployees, logoUrl }

    Authorization required: none
    """
    return {"job": jobs.get(job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope, dependencies=[Depends(ensure_admin)])
def update_job(
    job_id: int,
    body: Dict[str, Any] = Body(...),
    jobs: JobRepository = Depends(get_job_repository),
):
    """
    Data can include: { title, salary, equity }

    Returns { job: { id, title, salary, equity, companyHandle } }
    Authorization required: admin
    """
    result = validate(body, JobUpdate)
    if not result.valid:
        raise BadRequestError(result.errors)

    job = jobs.update(job_id, result.instance.model_dump(exclude_unset=True))
    return {"job": job}


@router.delete("/{job_id}", response_model=DeletedEnvelope, dependencies=[Depends(ensure_admin)])
def delete_job(job_id: int, jobs: JobRepository = Depends(get_job_repository)):
    """
    Returns { deleted: id }
    Authorization required: admin
    """
    jobs.remove(job_id)
    return {"deleted": job_id}
