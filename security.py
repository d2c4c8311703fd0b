import datetime
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from config import Config


def hash_password(password: str) -> str:
    salt = bcrypt.gensalt(rounds=Config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed: Optional[str]) -> bool:
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


def sign_token(user_id: str, role: str) -> str:
    expires = datetime.datetime.now(datetime.timezone.utc) + datetime.timedelta(days=Config.TOKEN_EXPIRE_DAYS)
    payload = {"sub": str(user_id), "role": role, "exp": expires}
    return jwt.encode(payload, Config.JWT_SECRET, algorithm=Config.JWT_ALGORITHM)


def verify_token(token: str) -> Optional[dict]:
    """Returns {"user_id", "role"} for a valid token, None otherwise."""
    try:
        payload = jwt.decode(token, Config.JWT_SECRET, algorithms=[Config.JWT_ALGORITHM])
    except JWTError:
        return None

    if not payload.get("sub") or not payload.get("role"):
        return None
    return {"user_id": payload["sub"], "role": payload["role"]}
