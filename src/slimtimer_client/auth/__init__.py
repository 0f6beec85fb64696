from .credentials import ApiCredentials, AuthenticatedCredentials

__all__ = [
    "ApiCredentials",
    "AuthenticatedCredentials",
]
