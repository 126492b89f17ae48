# app/auth/supabase_auth.py

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from supabase import Client

from app.core.log import get_logger
from app.db.supabase_client import get_supabase_client

logger = get_logger(__name__)

# Looks for an "Authorization: Bearer <token>" header; tokenUrl is never called.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)


def get_auth_client() -> Client:
    return get_supabase_client()


def get_current_user_id(
    token: Optional[str] = Depends(oauth2_scheme),
    client: Client = Depends(get_auth_client),
) -> str:
    """
    Dependency to verify a Supabase access token and return the user id.
    Raises HTTPException 401 if the token is invalid, expired, or missing.
    """
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated: Token is missing",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        response = client.auth.get_user(token)
    except Exception as e:
        logger.warning(f"Supabase token verification failed: {e}")
        raise credentials_exception

    user = getattr(response, "user", None)
    if user is None or not getattr(user, "id", None):
        logger.warning("Token verified, but no user id was returned.")
        raise credentials_exception

    return str(user.id)
