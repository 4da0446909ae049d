from __future__ import annotations

from fastapi import FastAPI, Request


SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}


def install_security_headers(app: FastAPI, *, path_prefix: str = "/api") -> None:
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        if request.url.path.startswith(path_prefix):
            for name, value in SECURITY_HEADERS.items():
                response.headers[name] = value
        return response
