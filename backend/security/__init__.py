from .headers import SecurityHeadersMiddleware

__all__ = [
    "SecurityHeadersMiddleware",
]
