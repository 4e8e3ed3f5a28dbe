import threading

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

FILESERVER_PREFIX = "/app"


class HitCounter:
    """Process-wide file server hit counter; increments and resets are atomic."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._hits = 0

    def increment(self) -> int:
        with self._lock:
            self._hits += 1
            return self._hits

    def reset(self) -> None:
        with self._lock:
            self._hits = 0

    @property
    def value(self) -> int:
        with self._lock:
            return self._hits


class FileserverHitsMiddleware(BaseHTTPMiddleware):
    """Count every request that reaches the static file server."""

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        # bare "/app" is only a redirect to "/app/", which is counted when followed
        if path.startswith(FILESERVER_PREFIX + "/"):
            request.app.state.hits.increment()
        return await call_next(request)
