import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Config
from database import engine, Base
from permissions import can_call_api
from security import verify_token

# --- IMPORT ROUTERS (APIs) ---
from routers import auth, admissions, students, monthly_fees, fee_management
from routers import settings, school_fees, expenses, dashboard

# --- IMPORT MODELS (registers the tables on Base) ---
from models.users import User
from models.system import SchoolSetting
from models.masters import ClassFee
from models.students import Student, Admission
from models.fee_models import MonthlyFee
from models.expenses import Expense

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# --- CREATE DATABASE TABLES ---
Base.metadata.create_all(bind=engine)

app = FastAPI(title=Config.APP_NAME)

# Paths reachable without a session cookie
PUBLIC_PATHS = ["/api/auth/login", "/api/auth/register", "/api/health"]


# ==========================================
# AUTH MIDDLEWARE
# ==========================================
@app.middleware("http")
async def auth_middleware(request: Request, call_next):
    path = request.url.path

    if not path.startswith("/api/") or path in PUBLIC_PATHS or request.method == "OPTIONS":
        return await call_next(request)

    token = request.cookies.get(Config.AUTH_COOKIE_NAME)
    if not token:
        return JSONResponse({"detail": "Unauthorized"}, status_code=401)

    payload = verify_token(token)
    if not payload:
        # expired or tampered: drop the cookie
        response = JSONResponse({"detail": "Invalid token"}, status_code=401)
        response.delete_cookie(Config.AUTH_COOKIE_NAME, path="/")
        return response

    if not can_call_api(payload["role"], request.method, path):
        logger.warning("Role %s denied %s %s", payload["role"], request.method, path)
        return JSONResponse({"detail": "Forbidden"}, status_code=403)

    request.state.user_id = payload["user_id"]
    request.state.user_role = payload["role"]
    return await call_next(request)


# ==========================================
# CORS MIDDLEWARE
# ==========================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- REGISTER ROUTERS ---
app.include_router(auth.router)
app.include_router(admissions.router)
app.include_router(students.router)
app.include_router(monthly_fees.router)
app.include_router(fee_management.router)
app.include_router(settings.router)
app.include_router(school_fees.router)
app.include_router(expenses.router)
app.include_router(dashboard.router)


@app.get("/api/health")
def health():
    return {"status": "ok", "app": Config.APP_NAME}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=Config.APP_ENV != "production")
