from sqlalchemy import Column, Integer, String, Date, Boolean, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    reg_no = Column(String(50), nullable=True)
    student_name = Column(String(100), nullable=False)

    # --- PERSONAL INFO ---
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(10), nullable=False)
    aadhaar_number = Column(String(20), nullable=True)
    student_photo_base64 = Column(Text, nullable=True)

    # --- CONTACT ---
    email = Column(String(255), unique=True, nullable=True)
    phone = Column(String(20), nullable=False)
    address = Column(String(500), nullable=False)

    # --- PARENTS INFO ---
    father_name = Column(String(100), nullable=True)
    mother_name = Column(String(100), nullable=True)

    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # --- RELATIONSHIPS ---
    admission = relationship(
        "Admission", back_populates="student", uselist=False, cascade="all, delete-orphan"
    )
    monthly_fees = relationship(
        "MonthlyFee",
        back_populates="student",
        cascade="all, delete-orphan",
    )


class Admission(Base):
    __tablename__ = "admissions"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), unique=True, nullable=False)

    admission_date = Column(Date, nullable=False)
    class_enrolled = Column(String(50), nullable=False)
    section = Column(String(10), default="A")
    academic_year = Column(String(20), default="2025-2026")
    transport_type = Column(String(20), default="None")
    remarks = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    student = relationship("Student", back_populates="admission")
