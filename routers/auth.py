import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from config import Config
from database import get_db
from models.users import User
from permissions import SUPER_ADMIN
from schemas.users import LoginSchema, RegisterSchema, UserOut
from security import hash_password, sign_token, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

TOKEN_MAX_AGE = Config.TOKEN_EXPIRE_DAYS * 24 * 60 * 60


def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """Resolve the user the auth middleware put on request.state."""
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise HTTPException(status_code=401, detail="Unauthorized")

    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


# 1. Login (sets the session cookie)
@router.post("/login")
def process_login(response: Response, data: LoginSchema, db: Session = Depends(get_db)):
    user = db.query(User).filter(User.email == data.email).first()
    if not user or not verify_password(data.password, user.password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = sign_token(user.id, user.role)
    response.set_cookie(
        key=Config.AUTH_COOKIE_NAME,
        value=token,
        max_age=TOKEN_MAX_AGE,
        httponly=True,
        secure=Config.COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
    logger.info("User %s logged in", user.email)
    return {"id": user.id, "name": user.name, "email": user.email, "role": user.role}


# 2. Register (only a super admin may create users)
@router.post("/register", status_code=201)
def register_user(data: RegisterSchema, db: Session = Depends(get_db)):
    admin = db.query(User).filter(User.email == data.admin_email).first()
    if not admin or admin.role != SUPER_ADMIN:
        raise HTTPException(status_code=403, detail="Unauthorized: only a Super Admin can create users")
    if not verify_password(data.admin_password, admin.password):
        raise HTTPException(status_code=403, detail="Unauthorized: incorrect Super Admin password")

    if db.query(User).filter(User.email == data.email).first():
        raise HTTPException(status_code=409, detail="A user with that email already exists")

    user = User(
        name=data.name,
        email=data.email,
        password=hash_password(data.password),
        role=data.role,
    )
    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[register] failed to create user %s", data.email)
        raise HTTPException(status_code=500, detail="Internal server error")

    return {"message": "User created successfully", "user": UserOut.model_validate(user)}


# 3. Logout (clears the cookie)
@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(Config.AUTH_COOKIE_NAME, path="/")
    return {"success": True}


@router.get("/me")
def current_user(user: User = Depends(get_current_user)):
    return {"success": True, "data": UserOut.model_validate(user)}
