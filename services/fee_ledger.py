"""
Fee Ledger Generator

Builds the monthly fee-due records for a student from the admission month
through March of the financial year (April - March) the admission falls in.
Pure computation: no database access, no clock.

FeeScheduleInput takes a date object. Raw strings must go through
parse_date first: that is where a malformed date becomes InvalidDate.
Handing a bad string straight to FeeScheduleInput gives pydantic's
ValidationError instead.
"""
import datetime
from enum import Enum
from typing import List, Union

from pydantic import BaseModel, Field

from services.exceptions import InvalidDate

FINANCIAL_YEAR_START_MONTH = 4  # April
FINANCIAL_YEAR_END_MONTH = 3    # March


class FeeStatus(str, Enum):
    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    PAID = "PAID"


class FeeScheduleInput(BaseModel):
    admission_date: datetime.date
    tuition_fee: float = Field(0.0, ge=0)
    admission_fee: float = Field(0.0, ge=0)
    transport_fee: float = Field(0.0, ge=0)


class MonthlyFeeRecord(BaseModel):
    month: int
    year: int
    tuition_fee: float
    admission_fee: float
    transport_fee: float
    total_amount: float
    paid_amount: float = 0.0
    due_date: datetime.date
    status: FeeStatus = FeeStatus.PENDING


def parse_date(value: Union[str, datetime.date, datetime.datetime, None]) -> datetime.date:
    """Accepts a date, a datetime or an ISO-8601 string ("2025-06-15", "2025-06-15T00:00:00Z")."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDate(value)

    text = value.strip()
    try:
        return datetime.date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.datetime.fromisoformat(text).date()
    except ValueError:
        raise InvalidDate(value) from None


def financial_year_start(admission_date: datetime.date) -> int:
    # Jan-Mar belong to the financial year that began the previous April
    if admission_date.month >= FINANCIAL_YEAR_START_MONTH:
        return admission_date.year
    return admission_date.year - 1


def generate_fee_ledger(schedule: FeeScheduleInput) -> List[MonthlyFeeRecord]:
    month = schedule.admission_date.month
    year = schedule.admission_date.year
    end_year = financial_year_start(schedule.admission_date) + 1

    records = []
    while year < end_year or (year == end_year and month <= FINANCIAL_YEAR_END_MONTH):
        admission_fee = schedule.admission_fee if not records else 0.0
        records.append(MonthlyFeeRecord(
            month=month,
            year=year,
            tuition_fee=schedule.tuition_fee,
            admission_fee=admission_fee,
            transport_fee=schedule.transport_fee,
            total_amount=schedule.tuition_fee + admission_fee + schedule.transport_fee,
            due_date=datetime.date(year, month, 1),
        ))

        month += 1
        if month > 12:
            month = 1
            year += 1

    return records
