import logging
import sys

from sqlalchemy.orm import Session

from config import Config
from database import SessionLocal, engine, Base
from models.masters import ClassFee
from models.system import SchoolSetting
from models.users import User
from permissions import SUPER_ADMIN
from security import hash_password

logger = logging.getLogger(__name__)

DEFAULT_CLASSES = [
    ("Nursery", 500.0, 1000.0),
    ("LKG", 500.0, 1000.0),
    ("UKG", 550.0, 1000.0),
] + [(f"Class {n}", 600.0 + 50 * (n - 1), 1500.0) for n in range(1, 13)]


def seed_superadmin(db: Session, name: str, email: str, password: str):
    """Create the first SUPER_ADMIN. Returns (user, created)."""
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        logger.info("User %s already exists (role: %s). Skipping.", email, existing.role)
        return existing, False

    user = User(name=name, email=email, password=hash_password(password), role=SUPER_ADMIN)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Super admin created: %s", email)
    return user, True


def seed_default_settings(db: Session):
    """Demo school with a Nursery - Class 12 fee schedule, only when nothing is configured."""
    setting = db.query(SchoolSetting).first()
    if setting:
        logger.info("School settings already exist (%s). Skipping.", setting.school_id)
        return setting, False

    setting = SchoolSetting(
        school_id="demo-school",
        school_name="Demo Public School",
        slogan="Learn, Lead, Serve",
        transport_fee_below3=300.0,
        transport_fee_between3and5=500.0,
        transport_fee_between5and10=700.0,
        transport_fee_above10=900.0,
    )
    setting.classes = [
        ClassFee(name=name, tuition_fee=tuition, admission_fee=admission)
        for name, tuition, admission in DEFAULT_CLASSES
    ]
    db.add(setting)
    db.commit()
    db.refresh(setting)
    logger.info("Seeded school settings with %d classes", len(setting.classes))
    return setting, True


def main():
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(message)s")
    Base.metadata.create_all(bind=engine)

    if not Config.SUPERADMIN_EMAIL or not Config.SUPERADMIN_PASSWORD:
        logger.error("Set SUPERADMIN_EMAIL and SUPERADMIN_PASSWORD to seed the super admin.")
        return 1

    db = SessionLocal()
    try:
        seed_superadmin(db, Config.SUPERADMIN_NAME, Config.SUPERADMIN_EMAIL, Config.SUPERADMIN_PASSWORD)
        seed_default_settings(db)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
