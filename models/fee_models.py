"""
Fee Ledger Models - one row per student per month of the financial year
"""
from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from database import Base


# MONTHLY FEE - generated ledger row (CORE TABLE)
class MonthlyFee(Base):
    __tablename__ = "monthly_fees"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)

    month = Column(Integer, nullable=False)  # 1-12
    year = Column(Integer, nullable=False)

    # Amount breakdown, fixed at generation time
    tuition_fee = Column(Float, default=0.0)
    admission_fee = Column(Float, default=0.0)   # non-zero on the first month only
    transport_fee = Column(Float, default=0.0)
    total_amount = Column(Float, default=0.0)

    # Payment state
    paid_amount = Column(Float, default=0.0)
    due_date = Column(Date, nullable=False)
    paid_date = Column(Date, nullable=True)
    status = Column(String(20), default="PENDING")  # PENDING, PARTIAL, PAID

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Unique constraint: one ledger row per student per month
    __table_args__ = (
        UniqueConstraint("student_id", "month", "year", name="uq_student_month_year"),
    )

    student = relationship("Student", back_populates="monthly_fees")
