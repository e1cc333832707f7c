import logging
from urllib.parse import urlparse

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.api import auth, discover, favorites, profile, scans, tracker
from app.config import settings

logger = logging.getLogger(__name__)

app = FastAPI(title="FridgeChef", version="0.1.0")


# =============================================================================
# CSRF Origin Validation Middleware
# =============================================================================


class CSRFOriginMiddleware(BaseHTTPMiddleware):
    """
    Validate Origin/Referer headers on state-changing requests to prevent CSRF.

    - POST, PUT, PATCH, DELETE must include a matching Origin or Referer header
    - GET, HEAD, OPTIONS are always allowed (safe methods)
    - Requests authenticated with a bearer token are exempt (no ambient cookie)
    - Health check endpoints are exempt
    """

    SAFE_METHODS = {"GET", "HEAD", "OPTIONS"}
    EXEMPT_PATHS = {"/health"}

    async def dispatch(self, request: Request, call_next):
        if request.method in self.SAFE_METHODS:
            return await call_next(request)

        if request.url.path in self.EXEMPT_PATHS:
            return await call_next(request)

        if request.headers.get("authorization", "").lower().startswith("bearer "):
            return await call_next(request)

        # Determine the expected host from the request
        expected_host = request.headers.get("host", "")

        # Check Origin header first, fall back to Referer
        for header in ("origin", "referer"):
            value = request.headers.get(header)
            if not value:
                continue
            if urlparse(value).netloc != expected_host:
                logger.warning(
                    "CSRF %s mismatch: %s=%s, expected=%s, path=%s",
                    header,
                    header,
                    value,
                    expected_host,
                    request.url.path,
                )
                return JSONResponse(
                    status_code=403,
                    content={"detail": "Origin validation failed"},
                )
            return await call_next(request)

        logger.warning(
            "CSRF missing origin/referer: method=%s, path=%s",
            request.method,
            request.url.path,
        )
        return JSONResponse(
            status_code=403,
            content={"detail": "Origin validation failed"},
        )


app.add_middleware(CSRFOriginMiddleware)

# Uploaded scan photos
app.mount(
    f"/{settings.upload_dir}",
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="uploads",
)

# Include routers
app.include_router(auth.router)
app.include_router(profile.router)
app.include_router(scans.router)
app.include_router(scans.ingredients_router)
app.include_router(tracker.router)
app.include_router(favorites.router)
app.include_router(discover.router)


@app.get("/health")
async def health_check():
    return {"status": "healthy"}
