"""Map a caught failure to the message shown to the user."""

from __future__ import annotations

import logging

from core.domain.errors import AppError, ClassifiedError

logger = logging.getLogger(__name__)


def classify(error: BaseException, *, fallback: str) -> ClassifiedError:
    """Classify `error` for display.

    An `AppError` keeps its own message. Anything else (network failure,
    timeout, unexpected response shape) becomes `fallback` and is logged with
    its traceback. Never raises.
    """

    if isinstance(error, AppError) and error.message:
        return ClassifiedError(message=error.message, known=True)

    logger.error("Unclassified failure: %r", error, exc_info=error)
    return ClassifiedError(message=fallback, known=False)
