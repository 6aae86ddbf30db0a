"""
Session logging for FOLIO scripts.

One session writes a full DEBUG log to <log_dir>/<context>.log and mirrors
INFO and above to stderr, so rendered output on stdout stays clean. Every
session log opens with a header recording what produced it.
Context-specific wrappers live in contexts/{context}/logger.py.
"""

import platform
import sys
from pathlib import Path
from typing import Dict, Optional

from loguru import logger

from folio import __version__

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "<level>{level: <7}</level> | {message}"


def setup_logger(
    context_name: str,
    log_dir: Path,
    provenance: Optional[Dict[str, str]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Start a logging session for one context.

    Replaces any previously configured sinks.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "compose")
        log_dir: Directory of this session, created if missing
        provenance: Session details for the header (e.g., {"Template": "navigation"})
        console_level: Minimum level mirrored to stderr

    Returns:
        Path to the session log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG", encoding="utf-8")
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_session_header(context_name, provenance)
    return log_file


def session_provenance() -> Dict[str, str]:
    """Details identifying the process that produced a log."""
    return {
        "FOLIO": __version__,
        "Command": " ".join(sys.argv),
        "Working directory": str(Path.cwd()),
        "Python": platform.python_version(),
    }


def log_session_header(context_name: str, provenance: Optional[Dict[str, str]] = None) -> None:
    """Write the session header: process details, then caller-supplied ones."""
    details = {**session_provenance(), **(provenance or {})}
    width = max(len(key) for key in details)

    logger.info(f"{context_name} session")
    for key, value in details.items():
        logger.info(f"  {key:<{width}} : {value}")
