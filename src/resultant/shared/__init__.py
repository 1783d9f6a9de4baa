"""Shared module.

Cross-cutting concerns: configuration and logging.
"""
from resultant.shared.config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
