"""
Fee schedule lookups: school settings, class fees and transport tiers.
"""
import re
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from models.masters import ClassFee
from models.system import SchoolSetting
from services.exceptions import ClassNotFound, SettingsNotConfigured, UnknownTransportTier

NO_TRANSPORT = "None"

# canonical tier -> settings column
TRANSPORT_TIERS = {
    "Below 3KM": "transport_fee_below3",
    "3-5KM": "transport_fee_between3and5",
    "5-10KM": "transport_fee_between5and10",
    "Above 10KM": "transport_fee_above10",
}

# "Below 3KM" and "Below 3 km" are both in use; compare on a squashed key
_TIER_KEYS = {re.sub(r"\s+", "", tier).lower(): tier for tier in TRANSPORT_TIERS}


def get_school_settings(db: Session) -> SchoolSetting:
    setting = db.query(SchoolSetting).options(
        joinedload(SchoolSetting.classes)
    ).order_by(SchoolSetting.id).first()
    if not setting:
        raise SettingsNotConfigured()
    return setting


def find_class_fee(setting: SchoolSetting, class_name: str) -> ClassFee:
    for class_fee in setting.classes:
        if class_fee.name == class_name:
            return class_fee
    raise ClassNotFound(class_name)


def normalize_transport_tier(label: Optional[str]) -> str:
    if label is None or not label.strip() or label.strip().lower() == "none":
        return NO_TRANSPORT

    key = re.sub(r"\s+", "", label).lower()
    tier = _TIER_KEYS.get(key)
    if tier is None:
        raise UnknownTransportTier(label)
    return tier


def transport_fee_for(label: Optional[str], setting: SchoolSetting) -> float:
    tier = normalize_transport_tier(label)
    if tier == NO_TRANSPORT:
        return 0.0
    return float(getattr(setting, TRANSPORT_TIERS[tier]) or 0.0)


def transport_fees_payload(setting: SchoolSetting) -> dict:
    return {
        "below3": setting.transport_fee_below3 or 0,
        "between3and5": setting.transport_fee_between3and5 or 0,
        "between5and10": setting.transport_fee_between5and10 or 0,
        "above10": setting.transport_fee_above10 or 0,
    }
