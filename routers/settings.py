"""
School Settings Router - one settings row per deployment, with its class fee list
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from database import get_db
from models.masters import ClassFee
from models.system import SchoolSetting
from schemas.settings import SettingsOut, SettingsSave
from security import hash_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/settings", tags=["Settings"])


@router.get("")
def get_settings(db: Session = Depends(get_db)):
    setting = db.query(SchoolSetting).options(
        joinedload(SchoolSetting.classes)
    ).order_by(SchoolSetting.id).first()
    if not setting:
        raise HTTPException(status_code=404, detail="No settings found")
    return {"success": True, "data": SettingsOut.model_validate(setting)}


@router.post("")
def save_settings(data: SettingsSave, db: Session = Depends(get_db)):
    """Create or update the settings for data.school_id; the class list is replaced."""
    names = [c.name for c in data.classes]
    if len(names) != len(set(names)):
        raise HTTPException(status_code=400, detail="Class names must be unique")

    setting = db.query(SchoolSetting).filter(SchoolSetting.school_id == data.school_id).first()
    if not setting:
        setting = SchoolSetting(school_id=data.school_id)
        db.add(setting)

    setting.school_name = data.school_name
    setting.slogan = data.slogan
    setting.admin_name = data.admin_name
    setting.admin_email = data.admin_email
    if data.password:
        setting.admin_password_hash = hash_password(data.password)
    setting.logo_base64 = data.logo_base64 or ""
    setting.admin_image_base64 = data.admin_image_base64 or ""

    fees = data.transport_fees
    setting.transport_fee_below3 = fees.below3
    setting.transport_fee_between3and5 = fees.between3and5
    setting.transport_fee_between5and10 = fees.between5and10
    setting.transport_fee_above10 = fees.above10

    try:
        # delete-orphan: old classes are removed before the new ones are inserted
        setting.classes.clear()
        db.flush()
        setting.classes.extend(
            ClassFee(name=c.name, tuition_fee=c.tuition_fee, admission_fee=c.admission_fee)
            for c in data.classes
        )
        db.commit()
        db.refresh(setting)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[settings] failed to save settings for %s", data.school_id)
        raise HTTPException(status_code=500, detail="Something went wrong")

    return {"success": True, "data": SettingsOut.model_validate(setting)}
