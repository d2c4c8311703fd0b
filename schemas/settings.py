from pydantic import BaseModel, Field
from typing import List, Optional


class ClassFeeIn(BaseModel):
    name: str = Field(..., min_length=1)
    tuition_fee: float = Field(0.0, ge=0)
    admission_fee: float = Field(0.0, ge=0)


class TransportFeesIn(BaseModel):
    below3: Optional[float] = Field(None, ge=0)
    between3and5: Optional[float] = Field(None, ge=0)
    between5and10: Optional[float] = Field(None, ge=0)
    above10: Optional[float] = Field(None, ge=0)


class SettingsSave(BaseModel):
    school_name: str = Field(..., min_length=1)
    school_id: str = Field(..., min_length=1)
    slogan: Optional[str] = None
    admin_name: Optional[str] = None
    admin_email: Optional[str] = None
    password: Optional[str] = None
    logo_base64: Optional[str] = None
    admin_image_base64: Optional[str] = None
    classes: List[ClassFeeIn] = []
    transport_fees: TransportFeesIn = TransportFeesIn()


class ClassFeeOut(BaseModel):
    id: int
    name: str
    tuition_fee: float
    admission_fee: float

    class Config:
        from_attributes = True


class SettingsOut(BaseModel):
    id: int
    school_id: str
    school_name: str
    slogan: Optional[str] = None
    admin_name: Optional[str] = None
    admin_email: Optional[str] = None
    logo_base64: Optional[str] = None
    admin_image_base64: Optional[str] = None
    transport_fee_below3: Optional[float] = None
    transport_fee_between3and5: Optional[float] = None
    transport_fee_between5and10: Optional[float] = None
    transport_fee_above10: Optional[float] = None
    classes: List[ClassFeeOut] = []

    class Config:
        from_attributes = True
