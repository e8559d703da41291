"""
Jade Night Configuration.

Environment variables, settings, and logging configuration.
"""

from jade_night.config.settings import Settings, configure_logging, get_settings, make_rng

__all__ = ["Settings", "configure_logging", "get_settings", "make_rng"]
