"""Custom middleware for the application."""

import logging
import time

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

import redis.asyncio as redis

from marketplace.core.exceptions import RateLimitExceeded

logger = logging.getLogger(__name__)

SLOW_REQUEST_SECONDS = 1.0
RATE_LIMIT_WINDOW_SECONDS = 60
RATE_LIMIT_EXEMPT_PATHS = frozenset({"/health", "/docs", "/redoc", "/openapi.json"})


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-client request budget over a sliding window kept in Redis.

    Each request is recorded in a sorted set keyed by client IP. When Redis
    cannot be reached the request is let through and a warning is logged.
    """

    def __init__(self, app, redis_url: str, requests_per_minute: int = 100):
        super().__init__(app)
        self.redis_url = redis_url
        self.requests_per_minute = requests_per_minute
        self._redis: redis.Redis | None = None

    async def get_redis(self) -> redis.Redis:
        if self._redis is None:
            self._redis = redis.from_url(self.redis_url, encoding="utf-8", decode_responses=True)
        return self._redis

    @staticmethod
    def client_key(request: Request) -> str:
        """Bucket key for the caller, preferring proxy headers."""
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            client = forwarded.split(",")[0].strip()
        else:
            client = request.headers.get("X-Real-IP") or (
                request.client.host if request.client else "unknown"
            )
        return f"rate_limit:{client}"

    async def record_hit(self, key: str, now: int) -> int:
        """Record one request and return how many preceded it in the window."""
        client = await self.get_redis()
        async with client.pipeline(transaction=True) as pipe:
            await pipe.zremrangebyscore(key, 0, now - RATE_LIMIT_WINDOW_SECONDS)
            await pipe.zcard(key)
            await pipe.zadd(key, {str(time.time_ns()): now})
            await pipe.expire(key, RATE_LIMIT_WINDOW_SECONDS)
            _, previous, _, _ = await pipe.execute()
        return previous

    def _limit_headers(self, remaining: int, now: int) -> dict[str, str]:
        return {
            "X-RateLimit-Limit": str(self.requests_per_minute),
            "X-RateLimit-Remaining": str(max(0, remaining)),
            "X-RateLimit-Reset": str(now + RATE_LIMIT_WINDOW_SECONDS),
        }

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in RATE_LIMIT_EXEMPT_PATHS:
            return await call_next(request)

        now = int(time.time())
        try:
            previous = await self.record_hit(self.client_key(request), now)
        except redis.RedisError as e:
            logger.warning(f"Rate limiter unavailable, allowing request: {e}")
            return await call_next(request)

        if previous >= self.requests_per_minute:
            exc = RateLimitExceeded(retry_after=RATE_LIMIT_WINDOW_SECONDS)
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": exc.detail, "retry_after": exc.retry_after},
                headers={**exc.headers, **self._limit_headers(0, now)},
            )

        response = await call_next(request)
        response.headers.update(
            self._limit_headers(self.requests_per_minute - previous - 1, now)
        )
        return response


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging requests and response times."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.time()

        request_id = request.headers.get("X-Request-ID") or str(time.time_ns())
        request.state.request_id = request_id

        response = await call_next(request)

        duration = time.time() - start_time

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Response-Time"] = f"{duration:.3f}s"

        logger.debug(
            f"{request.method} {request.url.path} -> {response.status_code} "
            f"in {duration:.3f}s [{request_id}]"
        )
        if duration > SLOW_REQUEST_SECONDS:
            logger.warning(
                f"SLOW REQUEST: {request.method} {request.url.path} "
                f"took {duration:.3f}s"
            )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to responses."""

    def __init__(self, app, hsts: bool = True):
        super().__init__(app)
        self.hsts = hsts

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if self.hsts:
            response.headers["Strict-Transport-Security"] = (
                "max-age=31536000; includeSubDomains"
            )

        return response
