from datetime import timedelta
from typing import Any, Optional, Union
from jose import jwt
from lifetrack.core.config import settings
from lifetrack.utils.timezone import now_local

# Export the algorithm constant for use in other modules
ALGORITHM = settings.ALGORITHM

def create_access_token(subject: Union[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    if expires_delta:
        expire = now_local() + expires_delta
    else:
        expire = now_local() + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {"exp": expire, "sub": str(subject)}
    encoded_jwt = jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)
    return encoded_jwt

def decode_access_token(token: str) -> dict:
    """Decode and verify a bearer token. Raises jose.JWTError when invalid or expired."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
