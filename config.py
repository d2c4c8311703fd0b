import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default="0"):
    return os.environ.get(name, default).lower() not in ("0", "false", "no", "")


class Config:
    # --------------------------
    # App
    # --------------------------
    APP_NAME = os.environ.get("APP_NAME", "School Admin")
    APP_ENV = os.environ.get("APP_ENV", "development")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]

    # --------------------------
    # Database (SQLAlchemy)
    # --------------------------
    DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./school_admin.db")

    # --------------------------
    # Auth
    # --------------------------
    JWT_SECRET = os.environ.get("JWT_SECRET", "supersecret_jwt_key_change_in_production")
    JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
    TOKEN_EXPIRE_DAYS = int(os.environ.get("TOKEN_EXPIRE_DAYS", "7"))
    AUTH_COOKIE_NAME = os.environ.get("AUTH_COOKIE_NAME", "token")
    COOKIE_SECURE = _env_flag("COOKIE_SECURE", "1" if APP_ENV == "production" else "0")
    BCRYPT_ROUNDS = int(os.environ.get("BCRYPT_ROUNDS", "10"))

    # --------------------------
    # Seed super admin (seed.py)
    # --------------------------
    SUPERADMIN_NAME = os.environ.get("SUPERADMIN_NAME", "Super Admin")
    SUPERADMIN_EMAIL = os.environ.get("SUPERADMIN_EMAIL", "")
    SUPERADMIN_PASSWORD = os.environ.get("SUPERADMIN_PASSWORD", "")
