from starlette.middleware.base import BaseHTTPMiddleware

from infrastructure.logging import CORRELATION_HEADER, bind_request_context


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to the logging context for each request.

    The id comes from the incoming ``X-Correlation-ID`` header when present
    and is echoed back on the response.
    """

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
