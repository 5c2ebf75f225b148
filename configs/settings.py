"""
Configuration management for the Persona Relay service.

This module loads the .env file once on import and exposes:
- Module-level LOG_LEVEL and VERSION (read at import time)
- load_settings(): a frozen Settings snapshot built from the current environment
- PERSONAS: the fixed system prompts served by the HTTP layer
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

# interpolate=False keeps $ characters in API keys intact
load_dotenv(interpolate=False)


# =============================================================================
# CONFIGURATION VALIDATION
# =============================================================================

class ConfigurationError(Exception):
    """Raised when a configuration value is missing or invalid."""
    pass


def _get_int_env(key: str, default: int) -> int:
    """Read an integer environment variable or raise ConfigurationError."""
    raw = os.getenv(key, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} must be an integer, got: {raw!r}")


def _get_optional_env(key: str) -> Optional[str]:
    """Return a stripped environment value, or None when unset or blank."""
    value = os.getenv(key, "").strip()
    return value or None


# =============================================================================
# BASE PATHS
# =============================================================================

BASE_DIR = Path(__file__).parent.parent
DEFAULT_STATIC_DIR = BASE_DIR / "client" / "build"

# =============================================================================
# SERVICE SETTINGS
# =============================================================================

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

VERSION = "1.0.0"


# =============================================================================
# SETTINGS SNAPSHOT
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, built once at startup and never mutated."""
    hf_api_token: Optional[str] = None
    openai_api_key: Optional[str] = None
    hf_model: str = "deepseek-ai/DeepSeek-V3"
    openai_model: str = "gpt-3.5-turbo"
    request_timeout_seconds: int = 60
    host: str = "0.0.0.0"
    port: int = 4000
    allowed_origins: Tuple[str, ...] = ("*",)
    static_dir: str = str(DEFAULT_STATIC_DIR)


def load_settings() -> Settings:
    """
    Build a Settings value from the current environment.

    Unlike the module constants this re-reads os.environ, so tests can
    monkeypatch variables and get a fresh snapshot.

    Raises:
        ConfigurationError: If PORT or REQUEST_TIMEOUT_SECONDS is not an integer
    """
    origins = [o.strip() for o in os.getenv("ALLOWED_ORIGINS", "*").split(",") if o.strip()]
    return Settings(
        hf_api_token=_get_optional_env("HF_API_TOKEN"),
        openai_api_key=_get_optional_env("OPENAI_API_KEY"),
        hf_model=os.getenv("HF_MODEL", "deepseek-ai/DeepSeek-V3"),
        openai_model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
        request_timeout_seconds=_get_int_env("REQUEST_TIMEOUT_SECONDS", 60),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_get_int_env("PORT", 4000),
        allowed_origins=tuple(origins) or ("*",),
        static_dir=os.getenv("STATIC_DIR", str(DEFAULT_STATIC_DIR)),
    )


# =============================================================================
# PERSONAS
# =============================================================================

@dataclass(frozen=True)
class Persona:
    """A fixed-persona endpoint: which body field it reads and how it prompts."""
    name: str
    path: str
    field: str
    system_prompt: str
    label: Optional[str] = None

    def user_content(self, value: str) -> str:
        """Format the user turn, prefixing the label when the persona has one."""
        if self.label is None:
            return value
        return f"{self.label}: {value}"


PERSONA_PROMPTS: Dict[str, str] = {
    "health": "You are a medical assistant. Provide basic triage and advice with disclaimer.",
    "agriculture": "You are an agriculture expert. Provide planting and pest control tips.",
    "finance": "You are a financial advisor. Suggest plans and cost-saving tips.",
    "general": "You are a helpful AI assistant.",
}

PERSONAS: Dict[str, Persona] = {
    "health": Persona(
        name="health",
        path="/health",
        field="symptoms",
        system_prompt=PERSONA_PROMPTS["health"],
        label="Patient symptoms",
    ),
    "agriculture": Persona(
        name="agriculture",
        path="/agriculture",
        field="context",
        system_prompt=PERSONA_PROMPTS["agriculture"],
        label="Context",
    ),
    "finance": Persona(
        name="finance",
        path="/finance",
        field="budgetDetails",
        system_prompt=PERSONA_PROMPTS["finance"],
        label="Budget details",
    ),
    "general": Persona(
        name="general",
        path="/general",
        field="message",
        system_prompt=PERSONA_PROMPTS["general"],
    ),
}
