import os
from dataclasses import dataclass


DEFAULT_BASE_URL = "http://slimtimer.com"
DEFAULT_TIMEOUT = 30.0

# Allow environment variable override of the service settings
BASE_URL_ENV = "SLIMTIMER_BASE_URL"
TIMEOUT_ENV = "SLIMTIMER_TIMEOUT"
DEBUG_ENV = "SLIMTIMER_DEBUG"
API_KEY_ENV = "SLIMTIMER_API_KEY"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class ClientConfig:
    """
    Settings shared by every request a client makes.
    Args:
        base_url: Root URL of the SlimTimer service, without trailing slash.
        timeout: Seconds to wait for the service before giving up.
        debug: Log raw response bodies at DEBUG level.
    """
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    debug: bool = False

    def __post_init__(self):
        if not self.base_url:
            raise ValueError("base_url cannot be empty")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build the configuration from SLIMTIMER_* environment variables."""
        timeout = os.getenv(TIMEOUT_ENV)
        try:
            timeout = float(timeout) if timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ValueError(f"{TIMEOUT_ENV} must be a number, got {timeout!r}") from None

        return cls(
            base_url=os.getenv(BASE_URL_ENV, DEFAULT_BASE_URL),
            timeout=timeout,
            debug=os.getenv(DEBUG_ENV, "").strip().lower() in _TRUE_VALUES,
        )
