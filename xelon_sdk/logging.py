import logging
import json
from typing import Any, Optional


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the appropriate name.

    Args:
        name: Optional specific logger name. If not provided, uses the package logger.

    Returns:
        A logger instance for the specified name
    """
    if name is None:
        return logging.getLogger("xelon_sdk")
    elif name.startswith("xelon_sdk"):
        return logging.getLogger(name)
    else:
        return logging.getLogger(f"xelon_sdk.{name}")


def log_api_request(
    logger: logging.Logger,
    method: str,
    url: str,
    body: Optional[bytes] = None,
    max_length: int = 300,
):
    """
    Log an outgoing API request using the provided logger.

    Args:
        logger: Logger to use
        method: HTTP method of the request.
        url: Sanitized URL of the request.
        body: Encoded request body, if any.
        max_length: Maximum length for the body in the log. Default is 300.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    if not body:
        logger.debug(f"API Request {method} {url}")
        return

    body_str = body.decode("utf-8", errors="replace")
    if len(body_str) > max_length:
        body_str = body_str[:max_length] + "... [truncated]"
    logger.debug(f"API Request {method} {url}:\n{body_str}")


def log_api_response(
    logger: logging.Logger,
    url: str,
    response_data: Any,
    status_code: int,
    truncate: bool = True,
    max_length: int = 500,
):
    """
    Log API response data using the provided logger.

    Args:
        logger: Logger to use
        url: The sanitized API URL that was called.
        response_data: The decoded response data.
        status_code: HTTP status code.
        truncate: Whether to truncate large response values. Default is True.
        max_length: Maximum length for response in the log if truncated. Default is 500.
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return

    try:
        response_str = json.dumps(response_data)
        if truncate and len(response_str) > max_length:
            response_str = response_str[:max_length] + "... [truncated]"

        logger.debug(
            f"API Response from {url} (Status: {status_code}):\n{response_str}"
        )
    except (TypeError, ValueError) as e:
        logger.debug(
            f"API Response from {url} (Status: {status_code}) - Error serializing: {e}"
        )
