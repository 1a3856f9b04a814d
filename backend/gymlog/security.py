from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional, Protocol
from passlib.context import CryptContext
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from gymlog.errors import AuthenticationError
from gymlog.settings import get_settings

ACCESS_TOKEN_TYPE = "access"

# Login passwords only; tokens are signed, never stored
pwd_ctx = CryptContext(schemes=["bcrypt"], deprecated="auto")

def hash_password(password: str) -> str:
    return pwd_ctx.hash(password)

def verify_password(password: str, password_hash: str) -> bool:
    return pwd_ctx.verify(password, password_hash)

def create_access_token(
    username: str,
    *,
    expires_minutes: Optional[int] = None,
    token_type: str = ACCESS_TOKEN_TYPE,
) -> str:
    """Sign a token whose subject is the username it was issued to."""
    s = get_settings()
    if expires_minutes is None:
        expires_minutes = s.ACCESS_TOKEN_EXPIRE_MINUTES
    issued = datetime.now(timezone.utc)
    claims = {
        "sub": username,
        "typ": token_type,
        "iat": int(issued.timestamp()),
        "exp": int((issued + timedelta(minutes=expires_minutes)).timestamp()),
    }
    return jwt.encode(claims, s.SECRET_KEY, algorithm=s.ALGORITHM)

def bearer_header(token: str) -> str:
    """Value for the Authorization header; clients echo it back unchanged."""
    return f"Bearer {token}"

def decode_token(token: str) -> Dict[str, Any]:
    """
    Check signature and expiry, then that this is an access token with an exp claim.
    Raises ExpiredSignatureError / JWTError.
    """
    s = get_settings()
    claims = jwt.decode(token, s.SECRET_KEY, algorithms=[s.ALGORITHM])
    if "exp" not in claims:
        raise JWTError("Missing exp")
    if claims.get("typ") != ACCESS_TOKEN_TYPE:
        raise JWTError("Not an access token")
    return claims


class IdentityResolver(Protocol):
    """Turns a bearer token into the username it was issued for."""

    def resolve_identity(self, token: str) -> str:
        """Return the identity or raise AuthenticationError."""
        ...


class UserLookup(Protocol):
    def get(self, username: str) -> Any: ...


class JwtIdentityResolver:
    """
    Resolves our own HS256 tokens. The subject must still exist in the
    credential store and be enabled, so disabling a user cuts off tokens
    that have not expired yet.
    """

    def __init__(self, users: UserLookup):
        self.users = users

    def resolve_identity(self, token: str) -> str:
        try:
            payload = decode_token(token)
        except ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except JWTError:
            raise AuthenticationError("Not authenticated")

        sub = payload.get("sub")
        if not sub:
            raise AuthenticationError("Not authenticated")
        user = self.users.get(str(sub))
        if user is None or not user.enabled:
            raise AuthenticationError("Not authenticated")
        return user.username
