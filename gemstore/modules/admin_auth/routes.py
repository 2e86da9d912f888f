from fastapi import APIRouter, Depends, HTTPException, Response
from fastapi.responses import JSONResponse
from gemstore.modules.admin_auth.schemas import (
    AdminLoginRequest, AdminLoginResponse, AdminVerifyResponse, AdminLogoutResponse
)
from gemstore.modules.admin_auth.service import AdminAuthService
from gemstore.core.dependencies import get_admin_auth_service, get_bearer_token
from gemstore.config import settings
from typing import Optional

router = APIRouter(prefix="/admin", tags=["admin-auth"])

ADMIN_COOKIE = "admin-token"


@router.post("/login", response_model=AdminLoginResponse)
async def login(
    login_data: AdminLoginRequest,
    response: Response,
    service: AdminAuthService = Depends(get_admin_auth_service)
):
    """Login with an admin passcode and get a bearer token"""
    result = service.login(login_data)
    # httpOnly cookie mirrors the bearer token for browser sessions
    response.set_cookie(
        ADMIN_COOKIE,
        result.token,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
        max_age=settings.admin_token_ttl_days * 24 * 60 * 60,
        path="/",
    )
    return result


@router.get("/verify", response_model=AdminVerifyResponse)
async def verify(
    token: Optional[str] = Depends(get_bearer_token),
    service: AdminAuthService = Depends(get_admin_auth_service)
):
    """Check whether the bearer token is a valid admin session"""
    if not token:
        return JSONResponse(status_code=401, content={"valid": False})
    try:
        claims = service.verify_token(token)
    except HTTPException:
        return JSONResponse(status_code=401, content={"valid": False})
    return AdminVerifyResponse(valid=True, email=claims.get("email"), name=claims.get("name"))


@router.post("/logout", response_model=AdminLogoutResponse)
async def logout(response: Response):
    """Clear the admin cookie (bearer tokens simply expire)"""
    response.delete_cookie(ADMIN_COOKIE, path="/")
    return AdminLogoutResponse()
