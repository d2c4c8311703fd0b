from sqlalchemy import Column, Integer, String, Text, Float, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from database import Base


class SchoolSetting(Base):
    __tablename__ = "school_settings"

    id = Column(Integer, primary_key=True, index=True)
    school_id = Column(String(50), unique=True, nullable=False, index=True)
    school_name = Column(String(255), nullable=False)
    slogan = Column(String(255), nullable=True)

    admin_name = Column(String(100), nullable=True)
    admin_email = Column(String(255), nullable=True)
    admin_password_hash = Column(String(255), nullable=True)

    logo_base64 = Column(Text, default="")
    admin_image_base64 = Column(Text, default="")

    # Transport tiers (flat monthly fee per distance band, NULL = not offered)
    transport_fee_below3 = Column(Float, nullable=True)
    transport_fee_between3and5 = Column(Float, nullable=True)
    transport_fee_between5and10 = Column(Float, nullable=True)
    transport_fee_above10 = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    classes = relationship(
        "ClassFee",
        back_populates="setting",
        cascade="all, delete-orphan",
        order_by="ClassFee.name",
    )
