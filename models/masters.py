from sqlalchemy import Column, Integer, String, Float, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database import Base


# CLASS FEE SCHEDULE (one row per class per school)
class ClassFee(Base):
    __tablename__ = "class_fees"

    id = Column(Integer, primary_key=True, index=True)
    setting_id = Column(Integer, ForeignKey("school_settings.id"), nullable=False)
    name = Column(String(50), nullable=False)
    tuition_fee = Column(Float, default=0.0)     # charged every month
    admission_fee = Column(Float, default=0.0)   # charged once, first month only

    __table_args__ = (
        UniqueConstraint("setting_id", "name", name="uq_setting_class_name"),
    )

    setting = relationship("SchoolSetting", back_populates="classes")
