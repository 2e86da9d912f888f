from pydantic import BaseModel, ConfigDict, EmailStr, Field
from typing import Optional


class AdminLoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    passcode: str
    captcha_token: Optional[str] = Field(None, alias="captchaToken")
    step: str = "initial"  # initial | verify_code


class AdminLoginResponse(BaseModel):
    success: bool = True
    token: str
    message: str = "Login successful"


class AdminVerifyResponse(BaseModel):
    valid: bool
    email: Optional[str] = None
    name: Optional[str] = None


class AdminLogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logged out"
