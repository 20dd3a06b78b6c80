# Models package
# Importing modules here ensures they are registered with SQLAlchemy Base
from . import company, job

# Explicit class exports for cleaner imports
from .company import Company
from .job import Job

__all__ = [
    "Company",
    "Job",
]
