import asyncio
import logging

DISCORD_MESSAGE_LIMIT = 2000


def report_crash(t: asyncio.Task, logger: logging.Logger) -> None:
    """Done-callback for background tasks, cancellation is not a crash."""
    if t.cancelled():
        return
    exc = t.exception()
    if exc is None:
        return
    logger.error("crashed %s: %s", type(exc).__name__, exc, exc_info=(type(exc), exc, exc.__traceback__))


def truncate_middle(text: str, max_length: int = 5000) -> str:
    if len(text) <= max_length:
        return text
    half = max_length // 2
    return f"{text[:half]}\n...\n{text[-half:]}"


def fit_message(text: str, limit: int = DISCORD_MESSAGE_LIMIT) -> str:
    """
    Shrink a reply so Discord accepts it. The head and the tail survive,
    the tail usually has the totals and the provenance line.
    """
    if len(text) <= limit:
        return text
    # "\n...\n" takes 5 characters
    return truncate_middle(text, max_length=limit - 6)
