import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_JOB_FEED_URL = "https://empllo.com/api/v1"


def get_config() -> dict[str, str]:
    """
    Load configuration from environment variables.
    Every setting is optional; values are parsed and checked on access.
    """
    return {
        "JOB_FEED_URL": os.getenv("JOB_FEED_URL", DEFAULT_JOB_FEED_URL),
        "FEED_TIMEOUT": os.getenv("FEED_TIMEOUT", "15"),
        "FEED_MAX_RETRIES": os.getenv("FEED_MAX_RETRIES", "1"),
        "SUBMIT_DELAY": os.getenv("SUBMIT_DELAY", "0.8"),
    }


def _parse_float(name: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got '{raw}'") from None


class _Config:
    """Lazy configuration that only reads the environment when values are accessed."""

    def __init__(self) -> None:
        self._config: dict[str, str] | None = None

    def _load(self) -> dict[str, str]:
        if self._config is None:
            self._config = get_config()
        return self._config

    @property
    def JOB_FEED_URL(self) -> str:
        url = self._load()["JOB_FEED_URL"].strip()
        if not url:
            raise ValueError("JOB_FEED_URL must not be empty.")
        return url

    @property
    def FEED_TIMEOUT(self) -> float:
        """Feed request timeout in seconds. Must be positive."""
        timeout = _parse_float("FEED_TIMEOUT", self._load()["FEED_TIMEOUT"])
        if timeout <= 0:
            raise ValueError(f"FEED_TIMEOUT must be positive, got {timeout}")
        return timeout

    @property
    def FEED_MAX_RETRIES(self) -> int:
        """Total fetch attempts for transient feed errors. Must be a positive integer."""
        raw = self._load()["FEED_MAX_RETRIES"]
        try:
            attempts = int(raw)
        except ValueError:
            raise ValueError(f"FEED_MAX_RETRIES must be a positive integer, got '{raw}'") from None
        if attempts <= 0:
            raise ValueError(f"FEED_MAX_RETRIES must be a positive integer, got {attempts}")
        return attempts

    @property
    def SUBMIT_DELAY(self) -> float:
        """Simulated application submission latency in seconds."""
        delay = _parse_float("SUBMIT_DELAY", self._load()["SUBMIT_DELAY"])
        if delay < 0:
            raise ValueError(f"SUBMIT_DELAY must not be negative, got {delay}")
        return delay


_cfg = _Config()

# Module-level type declarations for mypy.
# The values come from __getattr__ below.
JOB_FEED_URL: str
FEED_TIMEOUT: float
FEED_MAX_RETRIES: int
SUBMIT_DELAY: float


# Lazy module attributes (PEP 562): `from job_finder.config import FEED_TIMEOUT`
# resolves the value when first imported, not when this module loads.
def __getattr__(name: str) -> str | int | float:
    if name == "JOB_FEED_URL":
        return _cfg.JOB_FEED_URL
    if name == "FEED_TIMEOUT":
        return _cfg.FEED_TIMEOUT
    if name == "FEED_MAX_RETRIES":
        return _cfg.FEED_MAX_RETRIES
    if name == "SUBMIT_DELAY":
        return _cfg.SUBMIT_DELAY
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
