import logging
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from gemstore.config import settings
from gemstore.core.limiter import limiter
from gemstore.modules.admin_auth import routes as admin_auth_routes
from gemstore.modules.orders import routes as orders_routes
from gemstore.modules.products import routes as products_routes
from gemstore.modules.categories import routes as categories_routes
from gemstore.modules.auctions import routes as auctions_routes
from gemstore.modules.site_content import routes as site_content_routes
from gemstore.modules.content import routes as content_routes
from gemstore.modules.dashboard import routes as dashboard_routes
from gemstore.modules.payments import routes as payments_routes
from gemstore.modules.uploads import routes as uploads_routes
from gemstore.modules.addresses import routes as addresses_routes
from gemstore.modules.featured_products import routes as featured_products_routes
from gemstore.modules.settings import routes as settings_routes

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    debug=settings.debug,
    redirect_slashes=False,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception: %s", exc)
    if settings.is_production:
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})
    return JSONResponse(status_code=500, content={"detail": str(exc)})


class SecurityHeadersMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_with_headers(message):
            if message["type"] == "http.response.start":
                message.setdefault("headers", [])
                message["headers"].extend([
                    (b"X-Content-Type-Options", b"nosniff"),
                    (b"X-Frame-Options", b"DENY"),
                    (b"Referrer-Policy", b"strict-origin-when-cross-origin"),
                ])
            await send(message)

        await self.app(scope, receive, send_with_headers)


app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include module routes
for module in (
    admin_auth_routes,
    orders_routes,
    products_routes,
    categories_routes,
    auctions_routes,
    site_content_routes,
    content_routes,
    dashboard_routes,
    payments_routes,
    uploads_routes,
    addresses_routes,
    featured_products_routes,
    settings_routes,
):
    app.include_router(module.router, prefix="/api")


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup")
    if not settings.stripe_webhook_secret:
        logger.warning("STRIPE_WEBHOOK_SECRET not set; Stripe webhooks will be rejected")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutdown")


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.app_name}", "status": "healthy"}


@app.get("/health")
@limiter.exempt
async def health():
    return {"status": "healthy"}


@app.get("/ready")
@limiter.exempt
async def ready():
    """Readiness check"""
    return {"status": "ready"}
