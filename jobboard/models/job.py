from sqlalchemy import Column, Integer, String, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from jobboard.database import Base

# Bounds of a SQL INTEGER column (PostgreSQL int4)
SQL_INT_MIN = -2147483648
SQL_INT_MAX = 2147483647

class Job(Base):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint("CAST(equity AS REAL) BETWEEN 0 AND 1", name="ck_jobs_equity"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, nullable=True)
    # Decimal text kept exactly as given ("0.10" stays "0.10"); compare via CAST
    equity = Column(Text, nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    company = relationship("Company", back_populates="jobs")

    def __repr__(self):
        return f"<Job {self.id} {self.title!r}>"
