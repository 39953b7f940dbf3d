"""
Infrastructure module exports.

Configuration and bootstrap for all service collaborators.
"""

from .config import AppConfig, get_config, FailureLogBackendType
from .bootstrap import AppServices, bootstrap_services

__all__ = [
    "AppConfig",
    "get_config",
    "FailureLogBackendType",
    "AppServices",
    "bootstrap_services",
]
