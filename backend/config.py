# config.py
import os
import logging
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(funcName)-15s | %(message)s"

DEFAULT_MODEL = "gemini-1.5-flash"


def _env_flag(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    return raw in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    api_key: str = ""
    model_name: str = DEFAULT_MODEL
    api_endpoint: Optional[str] = None
    prompt_nonce: bool = True
    log_level: str = "INFO"

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def load_settings() -> Settings:
    """
    Reads the process environment (and .env) once. A missing GEMINI_API_KEY is not
    fatal here: every request is refused later with a configuration error instead.
    """
    return Settings(
        api_key=os.getenv("GEMINI_API_KEY", "").strip(),
        model_name=(os.getenv("GEMINI_MODEL") or "").strip() or DEFAULT_MODEL,
        api_endpoint=(os.getenv("GEMINI_API_ENDPOINT") or "").strip() or None,
        prompt_nonce=_env_flag("QUIZ_PROMPT_NONCE", True),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
