"""Application wiring shared across domains."""

from .runtime import RuntimeConfig
from .services import AppServices, build_app_services

__all__ = [
    "AppServices",
    "RuntimeConfig",
    "build_app_services",
]
