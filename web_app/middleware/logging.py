"""Request logging middleware."""

import time
import logging
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable, Optional

from shortener.common.logging_config import get_logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one line per request, escalating failed responses.
    
    Handlers write store errors to the client as bare text. They also leave
    the message in ``request.state.error_detail`` so it reaches the log:
    4xx responses are logged at WARNING and 5xx at ERROR.
    """
    
    def __init__(self, app, logger: Optional[logging.Logger] = None):
        super().__init__(app)
        self.logger = logger or get_logger("web")
    
    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.perf_counter()
        
        response = await call_next(request)
        
        duration_ms = (time.perf_counter() - start_time) * 1000
        client_ip = request.client.host if request.client else "unknown"
        line = (
            f"{request.method} {request.url.path} from {client_ip} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms"
        )
        
        detail = getattr(request.state, "error_detail", None)
        if detail:
            line = f"{line} - Error: {detail}"
        
        if response.status_code >= 500:
            self.logger.error(line)
        elif response.status_code >= 400:
            self.logger.warning(line)
        else:
            self.logger.info(line)
        
        return response
