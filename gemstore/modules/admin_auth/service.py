import hmac
import time
import httpx
from jose import jwt, JWTError, ExpiredSignatureError
from gemstore.modules.admin_auth.schemas import AdminLoginRequest, AdminLoginResponse
from gemstore.config import settings
from fastapi import HTTPException
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


class AdminAuthService:
    def __init__(self, http_client: Optional[httpx.Client] = None):
        self.http_client = http_client

    def verify_captcha(self, captcha_token: Optional[str]) -> bool:
        """Verify an hCaptcha response token. Skipped when no secret is configured."""
        if not settings.hcaptcha_secret_key:
            logger.warning("HCAPTCHA_SECRET_KEY not set, skipping captcha verification")
            return True
        if not captcha_token:
            return False
        payload = {"secret": settings.hcaptcha_secret_key, "response": captcha_token}
        try:
            if self.http_client is not None:
                response = self.http_client.post(settings.hcaptcha_verify_url, data=payload)
            else:
                with httpx.Client(timeout=10.0) as client:
                    response = client.post(settings.hcaptcha_verify_url, data=payload)
            return response.json().get("success") is True
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Captcha verification error: {e}")
            return False

    def _find_admin(self, email: str, passcode: str) -> Optional[str]:
        for admin_email, admin_passcode in settings.get_admin_users():
            if admin_email == email and hmac.compare_digest(admin_passcode, passcode):
                return admin_email
        return None

    def create_token(self, email: str) -> str:
        now = int(time.time())
        claims = {
            "email": email,
            "name": settings.get_admin_names().get(email, "Admin"),
            "isAdmin": True,
            "loginTime": now * 1000,
            "exp": now + settings.admin_token_ttl_days * 24 * 60 * 60,
        }
        return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    def login(self, login_data: AdminLoginRequest) -> AdminLoginResponse:
        """Passcode login for the configured admin accounts"""
        if login_data.step == "verify_code":
            raise HTTPException(status_code=400, detail="Use the verify-code endpoint")
        if login_data.step != "initial":
            raise HTTPException(status_code=400, detail="Invalid request")

        if not self.verify_captcha(login_data.captcha_token):
            raise HTTPException(status_code=400, detail="Captcha verification failed")

        admin_email = self._find_admin(login_data.email, login_data.passcode)
        if not admin_email:
            logger.warning(f"Failed admin login for {login_data.email}")
            raise HTTPException(status_code=401, detail="Invalid credentials")

        logger.info(f"Admin login: {admin_email}")
        return AdminLoginResponse(token=self.create_token(admin_email))

    def verify_token(self, token: str) -> Dict[str, Any]:
        """Decode an admin JWT and check it still belongs to a configured admin"""
        try:
            claims = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
        except ExpiredSignatureError:
            raise HTTPException(status_code=401, detail="Token expired")
        except JWTError:
            raise HTTPException(status_code=401, detail="Unauthorized")
        email = claims.get("email")
        if not email or not claims.get("isAdmin") or email not in settings.get_admin_emails():
            raise HTTPException(status_code=401, detail="Unauthorized")
        return claims
