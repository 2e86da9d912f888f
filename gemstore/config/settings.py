from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List, Tuple, Dict


class Settings(BaseSettings):
    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_role_key: Optional[str] = None  # Server-side writes; bypasses RLS

    # Admin auth (up to three passcode logins, as in the storefront .env)
    jwt_secret: str = "change-this-admin-jwt-secret"
    jwt_algorithm: str = "HS256"
    admin_token_ttl_days: int = 7
    admin_email_1: Optional[str] = None
    admin_passcode_1: Optional[str] = None
    admin_email_2: Optional[str] = None
    admin_passcode_2: Optional[str] = None
    admin_email_3: Optional[str] = None
    admin_passcode_3: Optional[str] = None
    admin_names: str = ""  # "email=Name,email=Name"
    hcaptcha_secret_key: Optional[str] = None
    hcaptcha_verify_url: str = "https://hcaptcha.com/siteverify"

    # Stripe
    stripe_secret_key: Optional[str] = None
    stripe_webhook_secret: Optional[str] = None
    stripe_currency: str = "cad"

    # PayPal
    paypal_client_id: Optional[str] = None
    paypal_client_secret: Optional[str] = None
    paypal_api_base: str = "https://api.sandbox.paypal.com"
    public_base_url: str = "http://localhost:3000"

    # OpenStreetMap address autocomplete
    nominatim_url: str = "https://nominatim.openstreetmap.org/search"
    nominatim_user_agent: str = "GemStore/1.0 (contact@example.com)"

    # Media storage (Supabase Storage bucket; S3 takes over when fully configured)
    storage_bucket: str = "product-images"
    aws_access_key_id: Optional[str] = None
    aws_secret_access_key: Optional[str] = None
    aws_region: str = "us-east-1"
    s3_bucket_name: Optional[str] = None

    # Orders
    test_currencies: str = "USD,CAD"  # every order in these currencies is still sandbox
    default_currency: str = "CAD"

    # App
    app_name: str = "gemstore-backend"
    debug: bool = False
    environment: str = "development"  # development | staging | production
    log_level: str = "INFO"
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"
    rate_limit: str = "100/minute"  # slowapi format, e.g. "100/minute"
    upload_rate_limit: str = "20/minute"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def s3_configured(self) -> bool:
        return all([self.aws_access_key_id, self.aws_secret_access_key, self.s3_bucket_name])

    def get_cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    def get_test_currencies(self) -> List[str]:
        return [c.strip().upper() for c in self.test_currencies.split(",") if c.strip()]

    def get_admin_users(self) -> List[Tuple[str, str]]:
        """Configured (email, passcode) pairs; half-configured slots are skipped."""
        pairs = [
            (self.admin_email_1, self.admin_passcode_1),
            (self.admin_email_2, self.admin_passcode_2),
            (self.admin_email_3, self.admin_passcode_3),
        ]
        return [(email, passcode) for email, passcode in pairs if email and passcode]

    def get_admin_emails(self) -> List[str]:
        return [email for email, _ in self.get_admin_users()]

    def get_admin_names(self) -> Dict[str, str]:
        names = {}
        for entry in self.admin_names.split(","):
            if "=" in entry:
                email, name = entry.split("=", 1)
                names[email.strip()] = name.strip()
        return names

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_prefix="",  # No prefix needed
        extra="ignore"
    )


settings = Settings()
