from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

Role = Literal["SUPER_ADMIN", "ADMIN", "TEACHER", "ACCOUNTANT"]


class LoginSchema(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6)


class RegisterSchema(BaseModel):
    # New user details
    name: str = Field(..., min_length=2)
    email: str = Field(..., pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=6)
    role: Role
    # Super admin credentials authorising the request
    admin_email: str = Field(..., pattern=EMAIL_PATTERN)
    admin_password: str = Field(..., min_length=1)


class UserOut(BaseModel):
    id: str
    name: str
    email: str
    role: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
