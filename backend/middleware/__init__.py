from .context import REQUEST_ID_HEADER, RequestContextMiddleware, get_request_id, request_id_headers

__all__ = [
    "RequestContextMiddleware",
    "REQUEST_ID_HEADER",
    "get_request_id",
    "request_id_headers",
]
