from .request_builder import build_query_request, build_body_request
from .response_handler import ResponseHandler

__all__ = [
    "build_query_request",
    "build_body_request",
    "ResponseHandler",
]
