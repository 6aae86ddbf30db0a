"""
Composition context logger.

Provides logging interface for composition context with automatic [compose] prefix.
All composition modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from folio.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[compose]"


def _session_details(template_id: str, locale: str, document_path: Optional[Path]) -> Dict[str, str]:
    details = {"Template": template_id, "Locale": locale}
    if document_path is not None:
        details["Document"] = str(document_path)
    return details


def setup_composition_logger(
    log_dir: Path, template_id: str, locale: str, document_path: Optional[Path] = None
) -> Path:
    """
    Setup logger for a composition session.

    Args:
        log_dir: Directory for this session
        template_id: Template being composed (recorded in the session header)
        locale: Locale used for field formatting
        document_path: Source document, when composing from a file

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="compose",
        log_dir=log_dir,
        provenance=_session_details(template_id, locale, document_path),
    )


def _log_info(message: str) -> None:
    """Log info message with [compose] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [compose] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [compose] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


def log_composition_result(template_id: str, tree, elapsed_time: float) -> None:
    """
    Log a summary of a finished composition.

    Args:
        template_id: Template that was composed
        tree: RenderTree produced by the composer
        elapsed_time: Time taken in seconds
    """
    zone_summary = ", ".join(f"{zone.name}={len(zone.sections)}" for zone in tree.zones)
    _log_success(f"Composed '{template_id}' ({elapsed_time:.3f}s)")
    _log_info(f"  Zones: {zone_summary}")
    if tree.extras:
        _log_info(f"  Extras: {', '.join(extra.kind for extra in tree.extras)}")
