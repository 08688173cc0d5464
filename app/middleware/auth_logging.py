from fastapi import Request
import logging
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("app")

# Paths reachable without a bearer token
PUBLIC_PATHS = ("/", "/register", "/login", "/docs", "/redoc", "/openapi.json")

class AuthLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if not request.headers.get("Authorization"):
            # For requests to protected endpoints, log a warning
            if path not in PUBLIC_PATHS and not path.startswith("/uploads/"):
                logger.warning(f"Protected endpoint {path} accessed without auth header")

        response = await call_next(request)

        # Log auth-related status codes
        if response.status_code in [401, 403]:
            logger.warning(f"Auth error: {response.status_code} on {path}")

        return response
