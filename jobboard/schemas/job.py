from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from jobboard.models.job import SQL_INT_MAX

# Decimal text in [0, 1]: "0", "0.25", ".5", "1", "1.0"
EQUITY_PATTERN = r"^(0(\.[0-9]+)?|\.[0-9]+|1(\.0+)?)$"


class JobNew(BaseModel):
    """Payload for POST /jobs. Every key must be present; salary/equity may be null."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(..., strict=True, min_length=1)
    salary: Optional[int] = Field(..., strict=True, ge=0, le=SQL_INT_MAX)
    equity: Optional[str] = Field(..., strict=True, pattern=EQUITY_PATTERN)
    company_handle: str = Field(..., alias="companyHandle", strict=True, min_length=1, max_length=25)


class JobUpdate(BaseModel):
    """Payload for PATCH /jobs/{id}. companyHandle is deliberately absent."""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, strict=True, min_length=1)
    salary: Optional[int] = Field(None, strict=True, ge=0, le=SQL_INT_MAX)
    equity: Optional[str] = Field(None, strict=True, pattern=EQUITY_PATTERN)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value):
        # Omitting title is fine; an explicit null is not
        if value is None:
            raise ValueError("title cannot be null")
        return value


class JobSearch(BaseModel):
    model_config = ConfigDict(extra="forbid")

    min_salary: Optional[int] = Field(None, alias="minSalary", strict=True, ge=0, le=SQL_INT_MAX)
    has_equity: Optional[bool] = Field(None, alias="hasEquity", strict=True)
    title: Optional[str] = Field(None, strict=True, min_length=1)


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CompanyResponse(ApiModel):
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class JobResponse(ApiModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company_handle: str


class JobListItem(JobResponse):
    company_name: Optional[str] = None


class JobDetail(ApiModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[str] = None
    company: CompanyResponse


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetail


class JobListEnvelope(BaseModel):
    jobs: List[JobListItem]


class DeletedEnvelope(BaseModel):
    deleted: int
