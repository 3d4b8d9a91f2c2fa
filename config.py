# Environment config (.env), logging setup.
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class ConfigError(RuntimeError):
    pass


def _env(name: str, default: str | None = None) -> str | None:
    value = (os.environ.get(name) or "").strip()
    return value or default


class Config:
    """Process-wide settings, read once at import."""

    GEMINI_API_KEY = _env("GEMINI_API_KEY")
    GEMINI_MODEL = _env("GEMINI_MODEL", "gemini-pro")
    SUPABASE_URL = _env("SUPABASE_URL")
    SUPABASE_KEY = _env("SUPABASE_KEY")
    LOG_LEVEL = _env("LOG_LEVEL", "INFO")

    @property
    def gemini_url(self) -> str:
        return f"{GEMINI_BASE_URL}/{self.GEMINI_MODEL}:generateContent"

    def require_supabase(self) -> tuple[str, str]:
        if not self.SUPABASE_URL or not self.SUPABASE_KEY:
            raise ConfigError("SUPABASE_URL and SUPABASE_KEY must be set in .env or environment.")
        return self.SUPABASE_URL, self.SUPABASE_KEY


settings = Config()

_logging_ready = False


def resolve_log_level(name: str | None) -> tuple[int, bool]:
    level = logging.getLevelName((name or "INFO").strip().upper())
    if isinstance(level, int):
        return level, True
    return logging.INFO, False


# Streamlit reruns the script on every interaction; only configure once.
def setup_logging(level: str | None = None) -> None:
    global _logging_ready
    if _logging_ready:
        return
    requested = level or settings.LOG_LEVEL
    resolved, known = resolve_log_level(requested)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    if not known:
        logging.getLogger("ClearMind.Config").warning(f"Unknown LOG_LEVEL {requested!r}, using INFO")
    # httpx logs every request URL at INFO, which would include the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    _logging_ready = True
