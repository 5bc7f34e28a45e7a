# backend/trip_api/core/cors.py

import re
from typing import Iterable, Optional
from urllib.parse import urlparse

from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from trip_api.core.logger import logger


ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]

LOCALHOST_ORIGIN = re.compile(r"^http://localhost(:\d+)?$")


class CorsPolicy:
    """
    Decides whether a browser origin may call the API.

    No origin (same-origin / curl / server-to-server) is always allowed,
    as is any local dev server on http://localhost and any host under one
    of the trusted deployment suffixes.
    """

    def __init__(self, trusted_suffixes: Iterable[str], allow_localhost: bool = True):
        # ".vercel.app" and "vercel.app" both mean the domain and its subdomains
        self.trusted_domains = tuple(
            s.strip().lstrip(".").lower() for s in trusted_suffixes if s.strip().lstrip(".")
        )
        self.allow_localhost = allow_localhost

    def allows(self, origin: Optional[str]) -> bool:
        if not origin:
            return True

        if self.allow_localhost and LOCALHOST_ORIGIN.match(origin):
            return True

        parsed = urlparse(origin)
        if parsed.scheme not in ("http", "https") or not parsed.hostname:
            return False

        host = parsed.hostname.lower()
        return any(
            host == domain or host.endswith("." + domain)
            for domain in self.trusted_domains
        )


class OriginPolicyMiddleware(CORSMiddleware):
    """Starlette CORS middleware driven by a CorsPolicy instead of a static list."""

    def __init__(self, app: ASGIApp, policy: CorsPolicy) -> None:
        super().__init__(
            app,
            allow_methods=ALLOWED_METHODS,
            allow_headers=ALLOWED_HEADERS,
            allow_credentials=False,
        )
        self.policy = policy

    def is_allowed_origin(self, origin: str) -> bool:
        return self.policy.allows(origin)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http":
            origin = Headers(scope=scope).get("origin")
            if origin is not None and not self.policy.allows(origin):
                logger.warning(f"Rejected request from origin {origin!r}")
                response = JSONResponse({"error": "Not allowed by CORS"}, status_code=403)
                await response(scope, receive, send)
                return

        await super().__call__(scope, receive, send)
