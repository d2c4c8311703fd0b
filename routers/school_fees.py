from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from database import get_db
from services.exceptions import SettingsNotConfigured
from services.fee_schedule import get_school_settings, transport_fees_payload

router = APIRouter(prefix="/api/school-fees", tags=["School Fees"])


# Fee structure used by the admission and fee forms
@router.get("")
def get_school_fees(db: Session = Depends(get_db)):
    try:
        setting = get_school_settings(db)
    except SettingsNotConfigured:
        raise HTTPException(status_code=404, detail="School settings not found")

    return {
        "success": True,
        "data": {
            "classes": [
                {"name": c.name, "tuition_fee": c.tuition_fee, "admission_fee": c.admission_fee}
                for c in setting.classes
            ],
            "transport_fees": transport_fees_payload(setting),
        },
    }
