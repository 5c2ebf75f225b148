"""Config module initialization."""
from .settings import (
    # Server configuration
    LOG_LEVEL,
    VERSION,
    # Settings snapshot
    Settings,
    load_settings,
    # Personas
    Persona,
    PERSONAS,
    PERSONA_PROMPTS,
    # Validation
    ConfigurationError,
)

__all__ = [
    "LOG_LEVEL",
    "VERSION",
    "Settings",
    "load_settings",
    "Persona",
    "PERSONAS",
    "PERSONA_PROMPTS",
    "ConfigurationError",
]
