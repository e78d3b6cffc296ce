"""Error logging utilities for data generation."""

import traceback
from typing import Any, Optional, Dict

from tpcdsgen.config.logging import get_logger
from tpcdsgen.errors import GenerationError, InvariantViolationError, OutputError

logger = get_logger(__name__)


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    operation: Optional[str] = None,
    table_name: Optional[str] = None,
    row_number: Optional[int] = None,
    chunk_num: Optional[int] = None,
    log_level: str = "error",
) -> None:
    """
    Log an error with its type, message, generation context and traceback.

    Args:
        error: The exception that occurred
        context: Additional context dictionary (e.g., {'first_row': 1, 'last_row': 1000})
        operation: Description of the operation being performed
        table_name: Name of the table where error occurred
        row_number: Row number being generated when the error occurred
        chunk_num: Chunk number if applicable
        log_level: Logging level ('error', 'warning', 'critical')
    """
    error_type = type(error).__name__

    context_parts = []
    if operation:
        context_parts.append(f"Operation: {operation}")
    if table_name:
        context_parts.append(f"Table: {table_name}")
    if row_number is not None:
        context_parts.append(f"Row: {row_number}")
    if chunk_num is not None:
        context_parts.append(f"Chunk: {chunk_num}")
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        context_parts.append(f"Context: {context_str}")

    error_msg = f"[{error_type}] {error}"
    if context_parts:
        error_msg += " | " + " | ".join(context_parts)

    if log_level.lower() == "critical":
        logger.critical(error_msg, exc_info=error)
    elif log_level.lower() == "warning":
        logger.warning(error_msg, exc_info=error)
    else:
        logger.error(error_msg, exc_info=error)

    if isinstance(error, InvariantViolationError):
        logger.debug(f"InvariantViolationError details: stream or row state out of step - {error}")
    elif isinstance(error, OutputError):
        logger.debug(f"OutputError details: output file could not be written - {error}")
    elif isinstance(error, GenerationError):
        logger.debug(f"GenerationError details: generation fault - {error}")
    elif isinstance(error, OSError):
        logger.debug(f"OSError details: OS-level error - {error}")

    logger.debug(f"Full traceback for {error_type}:\n{''.join(traceback.format_exception(error))}")
