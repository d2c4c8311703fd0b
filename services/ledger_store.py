"""
Fee ledger persistence and payment updates.

Both ledger call sites (new admission, bulk generation for an admitted
student) go through build_ledger_for_admission + persist_fee_ledger.
Nothing here commits: the caller owns the transaction.
"""
import datetime
import logging
from typing import Iterable, List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from models.fee_models import MonthlyFee
from models.students import Admission
from models.system import SchoolSetting
from services.exceptions import DuplicateLedgerEntry, InvalidPayment
from services.fee_ledger import FeeScheduleInput, FeeStatus, MonthlyFeeRecord, generate_fee_ledger
from services.fee_schedule import find_class_fee, transport_fee_for

logger = logging.getLogger(__name__)

STATUS_ALIASES = {"PARTIALLY_PAID": FeeStatus.PARTIAL.value}


def build_ledger_for_admission(setting: SchoolSetting, admission: Admission) -> List[MonthlyFeeRecord]:
    class_fee = find_class_fee(setting, admission.class_enrolled)
    schedule = FeeScheduleInput(
        admission_date=admission.admission_date,
        tuition_fee=class_fee.tuition_fee or 0.0,
        admission_fee=class_fee.admission_fee or 0.0,
        transport_fee=transport_fee_for(admission.transport_type, setting),
    )
    return generate_fee_ledger(schedule)


def persist_fee_ledger(
    db: Session,
    student_id: int,
    records: Iterable[MonthlyFeeRecord],
    skip_existing: bool = False,
) -> List[MonthlyFee]:
    existing = {
        (month, year)
        for month, year in db.query(MonthlyFee.month, MonthlyFee.year).filter(
            MonthlyFee.student_id == student_id
        )
    }

    rows = []
    for record in records:
        if (record.month, record.year) in existing:
            if skip_existing:
                continue
            raise DuplicateLedgerEntry(student_id, record.month, record.year)
        row = MonthlyFee(
            student_id=student_id,
            status=record.status.value,
            **record.model_dump(exclude={"status"}),
        )
        rows.append(row)

    db.add_all(rows)
    try:
        db.flush()
    except IntegrityError as e:
        # a concurrent request wrote the same month first
        raise DuplicateLedgerEntry(student_id) from e

    logger.info("Stored %d monthly fee rows for student %s", len(rows), student_id)
    return rows


def resolve_payment_status(paid_amount: float, total_amount: float, status: Optional[str] = None) -> str:
    if status:
        status = STATUS_ALIASES.get(status.upper(), status.upper())
        if status not in FeeStatus.__members__:
            raise InvalidPayment(f"Unknown fee status: {status}")
        return status

    if paid_amount >= total_amount:
        return FeeStatus.PAID.value
    if paid_amount > 0:
        return FeeStatus.PARTIAL.value
    return FeeStatus.PENDING.value


def apply_payment(
    fee: MonthlyFee,
    paid_amount: Optional[float] = None,
    status: Optional[str] = None,
    paid_date: Optional[datetime.date] = None,
) -> MonthlyFee:
    new_paid = (fee.paid_amount or 0.0) if paid_amount is None else paid_amount
    if new_paid < 0:
        raise InvalidPayment("Paid amount cannot be negative")

    resolved = resolve_payment_status(new_paid, fee.total_amount or 0.0, status)

    fee.paid_amount = new_paid
    fee.status = resolved
    if resolved == FeeStatus.PAID.value:
        fee.paid_date = paid_date or datetime.date.today()
    else:
        fee.paid_date = None
    return fee


def upsert_adhoc_fee(db: Session, student_id: int, amount: float, due_date: datetime.date) -> MonthlyFee:
    fee = db.query(MonthlyFee).filter(
        MonthlyFee.student_id == student_id,
        MonthlyFee.month == due_date.month,
        MonthlyFee.year == due_date.year,
    ).first()

    if fee:
        fee.tuition_fee = amount
        fee.admission_fee = 0.0
        fee.transport_fee = 0.0
        fee.total_amount = amount
        fee.paid_amount = 0.0
        fee.paid_date = None
        fee.status = FeeStatus.PENDING.value
        fee.due_date = due_date
    else:
        fee = MonthlyFee(
            student_id=student_id,
            month=due_date.month,
            year=due_date.year,
            tuition_fee=amount,
            admission_fee=0.0,
            transport_fee=0.0,
            total_amount=amount,
            paid_amount=0.0,
            due_date=due_date,
            status=FeeStatus.PENDING.value,
        )
        db.add(fee)

    db.flush()
    return fee


def summarize_fees(fees: Iterable[MonthlyFee]) -> dict:
    total = 0.0
    paid = 0.0
    pending_months = 0
    for fee in fees:
        amount = fee.total_amount or 0.0
        total += amount
        if fee.status == FeeStatus.PAID.value:
            paid += amount
        else:
            pending_months += 1

    return {
        "total_amount": total,
        "paid_amount": paid,
        "pending_amount": total - paid,
        "pending_months": pending_months,
    }
