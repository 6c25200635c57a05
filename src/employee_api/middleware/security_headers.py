# src/employee_api/middleware/security_headers.py

from fastapi import Request

# Swagger UI / ReDoc pull their assets from a CDN
DOCS_PATHS = ("/docs", "/redoc")


async def security_headers_middleware(request: Request, call_next):
    resp = await call_next(request)
    if not request.url.path.startswith(DOCS_PATHS):
        resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none'"
    resp.headers["X-Content-Type-Options"] = "nosniff"
    resp.headers["X-Frame-Options"] = "DENY"
    resp.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return resp
