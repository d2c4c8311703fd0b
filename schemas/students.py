from pydantic import BaseModel, Field, field_validator
from datetime import date, datetime
from typing import Optional


# 1. Admission form (POST /api/admissions)
class AdmissionCreate(BaseModel):
    # student
    student_name: str = Field(..., min_length=1)
    date_of_birth: str = Field(..., min_length=1)
    gender: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    city: Optional[str] = None
    state: Optional[str] = None
    email: Optional[str] = None
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    aadhaar_number: Optional[str] = None
    student_photo_base64: Optional[str] = None
    reg_no: Optional[str] = None

    # admission
    admission_date: str = Field(..., min_length=1)
    class_enrolled: str = Field(..., min_length=1)
    section: str = "A"
    academic_year: str = "2025-2026"
    remarks: Optional[str] = None
    transport_type: Optional[str] = "None"


# 2. Edit form (PUT /api/students/{id}) - only sent fields change
class StudentUpdate(BaseModel):
    student_name: Optional[str] = None
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    aadhaar_number: Optional[str] = None
    student_photo_base64: Optional[str] = None
    is_active: Optional[bool] = None

    # may be left out, but not cleared: these columns are NOT NULL
    @field_validator("student_name", "gender", "address", "phone", "is_active")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("cannot be null")
        return value


class StudentStatusUpdate(BaseModel):
    is_active: bool


class AdmissionOut(BaseModel):
    id: int
    student_id: int
    admission_date: date
    class_enrolled: str
    section: Optional[str] = None
    academic_year: Optional[str] = None
    transport_type: Optional[str] = None
    remarks: Optional[str] = None

    class Config:
        from_attributes = True


class StudentOut(BaseModel):
    id: int
    reg_no: Optional[str] = None
    student_name: str
    date_of_birth: date
    gender: str
    email: Optional[str] = None
    phone: str
    address: str
    father_name: Optional[str] = None
    mother_name: Optional[str] = None
    aadhaar_number: Optional[str] = None
    student_photo_base64: Optional[str] = None
    is_active: bool
    created_at: Optional[datetime] = None
    admission: Optional[AdmissionOut] = None

    class Config:
        from_attributes = True


class StudentBrief(BaseModel):
    id: int
    student_name: str
    father_name: Optional[str] = None
    phone: str
    is_active: bool
    admission: Optional[AdmissionOut] = None

    class Config:
        from_attributes = True
