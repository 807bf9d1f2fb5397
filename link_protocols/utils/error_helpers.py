def extract_error_context(
    exception: Exception, operation: str = "", pattern: str = "", url: str = ""
) -> dict:
    """Extract error context from exception and parameters.

    Args:
        exception: The exception that occurred
        operation: Operation that was being performed
        pattern: Protocol pattern involved, if any
        url: URL involved, if any

    Returns:
        Dictionary with error context
    """
    context = {
        "error_type": type(exception).__name__,
        "error_message": str(exception),
        "operation": operation,
        "pattern": pattern,
        "url": _truncate_url(url),
    }
    position = getattr(exception, "pos", None)
    if position is not None:
        context["position"] = position
    return context


def _truncate_url(url: str, max_length: int = 100) -> str:
    """Truncate long URLs for display.

    Args:
        url: URL to truncate
        max_length: Maximum length before truncation

    Returns:
        Truncated URL with ellipsis if needed
    """
    if len(url) <= max_length:
        return url
    return url[: max_length - 3] + "..."


def format_error_context(context: dict) -> str:
    """Render an error context as ``key=value`` pairs for log lines."""
    return ", ".join(f"{key}={value!r}" for key, value in context.items() if value != "")
