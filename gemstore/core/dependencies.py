"""
Core dependencies for admin route protection
"""

from fastapi import Depends, HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from gemstore.modules.admin_auth.service import AdminAuthService
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)

# auto_error=False so a missing header is a 401 (HTTPBearer alone answers 403)
security = HTTPBearer(auto_error=False)


def get_admin_auth_service() -> AdminAuthService:
    return AdminAuthService()


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security)
) -> Optional[str]:
    """Extract raw bearer token from Authorization header, if any"""
    if credentials is None or not credentials.credentials:
        return None
    return credentials.credentials


def require_admin(
    token: Optional[str] = Depends(get_bearer_token),
    auth_service: AdminAuthService = Depends(get_admin_auth_service)
) -> Dict[str, Any]:
    """Dependency for admin-only routes. Returns the decoded token claims."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized"
        )
    return auth_service.verify_token(token)


def optional_admin(
    token: Optional[str] = Depends(get_bearer_token),
    auth_service: AdminAuthService = Depends(get_admin_auth_service)
) -> Optional[Dict[str, Any]]:
    """Admin claims when a valid admin token is sent, otherwise None (public callers)."""
    if not token:
        return None
    try:
        return auth_service.verify_token(token)
    except HTTPException:
        return None
