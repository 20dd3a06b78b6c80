"""Data access for jobs. Every statement binds caller data as parameters."""
import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.core.exceptions import BadRequestError, NotFoundError
from jobboard.models.job import SQL_INT_MAX, SQL_INT_MIN
from jobboard.repositories.sql import (
    bind_params,
    placeholder,
    sql_for_filters,
    sql_for_partial_update,
)

logger = logging.getLogger(__name__)

# External field -> column for the fields a job update may touch
JOB_UPDATE_COLUMNS = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

JOB_RETURNING = 'id, title, salary, equity, company_handle AS "companyHandle"'

FOREIGN_KEY_VIOLATION = "23503"


def _equity_out(value: Any) -> Optional[str]:
    # Stored as text, so this is the caller's own string
    return None if value is None else str(value)


def _shape_job(row: Mapping[str, Any]) -> Dict[str, Any]:
    job = dict(row)
    job["equity"] = _equity_out(job.get("equity"))
    return job


def _ensure_storable_id(job_id: int) -> None:
    # No row can carry an id the INTEGER column cannot hold
    if not SQL_INT_MIN <= job_id <= SQL_INT_MAX:
        raise NotFoundError(f"No job: {job_id}")


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == FOREIGN_KEY_VIOLATION
    return "foreign key" in str(orig).lower()


class JobRepository:
    """
    CRUD over the jobs table, joined to companies where the response needs it.
    Each mutating call is a single statement committed on its own.
    """

    def __init__(self, db: Session):
        self.db = db

    def _commit(self):
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    def create(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a job from {title, salary, equity, companyHandle}.

        Returns {id, title, salary, equity, companyHandle}.
        Raises NotFoundError when the company does not exist.
        """
        stmt = text(
            "INSERT INTO jobs (title, salary, equity, company_handle) "
            "VALUES (:p1, :p2, :p3, :p4) "
            f"RETURNING {JOB_RETURNING}"
        )
        params = bind_params([
            data["title"],
            data.get("salary"),
            data.get("equity"),
            data["companyHandle"],
        ])
        try:
            row = self.db.execute(stmt, params).mappings().one()
            job = _shape_job(row)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if _is_foreign_key_violation(e):
                logger.warning(f"Job create rejected: unknown company {data['companyHandle']!r}")
                raise NotFoundError(f"No company: {data['companyHandle']}") from e
            raise
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.info(f"Created job {job['id']} for {job['companyHandle']}")
        return job

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> List[Dict[str, Any]]:
        """
        Find all jobs, optionally filtered by minSalary, hasEquity, title.

        Returns [{id, title, salary, equity, companyHandle, companyName}, ...]
        ordered by title.
        """
        # Unknown keys raise here, before any statement is issued
        where, values = sql_for_filters(filters or {})
        query = (
            "SELECT j.id, j.title, j.salary, j.equity, "
            'j.company_handle AS "companyHandle", c.name AS "companyName" '
            "FROM jobs AS j "
            "LEFT JOIN companies AS c ON c.handle = j.company_handle"
        )
        if where:
            query += f" WHERE {where}"
        query += " ORDER BY j.title"

        try:
            rows = self.db.execute(text(query), bind_params(values)).mappings().all()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        return [_shape_job(row) for row in rows]

    def get(self, job_id: int) -> Dict[str, Any]:
        """
        Returns {id, title, salary, equity, company}
          where company is {handle, name, description, numEmployees, logoUrl}
        """
        _ensure_storable_id(job_id)
        stmt = text(
            "SELECT j.id, j.title, j.salary, j.equity, "
            "c.handle, c.name, c.description, "
            'c.num_employees AS "numEmployees", c.logo_url AS "logoUrl" '
            "FROM jobs AS j "
            "JOIN companies AS c ON c.handle = j.company_handle "
            "WHERE j.id = :p1"
        )
        try:
            row = self.db.execute(stmt, bind_params([job_id])).mappings().first()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        if row is None:
            raise NotFoundError(f"No job: {job_id}")

        return {
            "id": row["id"],
            "title": row["title"],
            "salary": row["salary"],
            "equity": _equity_out(row["equity"]),
            "company": {
                "handle": row["handle"],
                "name": row["name"],
                "description": row["description"],
                "numEmployees": row["numEmployees"],
                "logoUrl": row["logoUrl"],
            },
        }

    def update(self, job_id: int, data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Partially update a job with a subset of {title, salary, equity}.

        companyHandle is write-once and is refused before anything else.
        Returns {id, title, salary, equity, companyHandle}.
        """
        if "companyHandle" in data:
            raise BadRequestError("companyHandle cannot be changed")

        set_cols, values = sql_for_partial_update(data, JOB_UPDATE_COLUMNS)
        _ensure_storable_id(job_id)
        id_placeholder = placeholder(len(values) + 1)
        stmt = text(
            f"UPDATE jobs SET {set_cols} "
            f"WHERE id = {id_placeholder} "
            f"RETURNING {JOB_RETURNING}"
        )
        try:
            row = self.db.execute(stmt, bind_params(values + [job_id])).mappings().first()
            if row is None:
                self.db.rollback()
                raise NotFoundError(f"No job: {job_id}")
            job = _shape_job(row)
            self._commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.info(f"Updated job {job_id}: {sorted(data)}")
        return job

    def remove(self, job_id: int) -> None:
        """Delete a job; raises NotFoundError if it does not exist."""
        _ensure_storable_id(job_id)
        stmt = text("DELETE FROM jobs WHERE id = :p1 RETURNING id")
        try:
            row = self.db.execute(stmt, bind_params([job_id])).first()
            if row is None:
                self.db.rollback()
                raise NotFoundError(f"No job: {job_id}")
            self._commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        logger.info(f"Deleted job {job_id}")
