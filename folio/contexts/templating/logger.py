"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from loguru import logger

CONTEXT_PREFIX = "[template]"


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_registry_loaded(config_path, template_ids, policy_ids) -> None:
    """Log a summary of a freshly loaded template registry."""
    _log_info(f"Loaded {len(template_ids)} template(s) from {config_path}")
    _log_debug(f"Templates: {', '.join(template_ids)}")
    _log_debug(f"Zone policies: {', '.join(policy_ids)}")
