# gymlog/deps/auth.py
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from gymlog.db import get_db
from gymlog.errors import AuthenticationError
from gymlog.repositories.user_repo import UserRepository
from gymlog.security import IdentityResolver, JwtIdentityResolver

# Exposes Bearer auth in Swagger; login endpoint issues the token.
# auto_error is off so a missing header goes through the same 401 path as a bad token.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)

def get_identity_resolver(db: Session = Depends(get_db)) -> IdentityResolver:
    """Swap this out with app.dependency_overrides to authenticate some other way."""
    return JwtIdentityResolver(UserRepository(db))

def get_identity(
    token: str | None = Depends(oauth2_scheme),
    resolver: IdentityResolver = Depends(get_identity_resolver),
) -> str:
    if not token:
        raise AuthenticationError("Not authenticated")
    return resolver.resolve_identity(token)
