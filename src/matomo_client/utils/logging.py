import logging
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

_MASKED_FIELDS = frozenset({"token_auth"})


def mask_secrets(params: dict[str, str]) -> dict[str, str]:
    """Return a copy of wire parameters safe to log."""
    return {key: "***" if key in _MASKED_FIELDS else value for key, value in params.items()}


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Route structlog events through the stdlib ``matomo_client`` logger.

    Parameters
    ----------
    level : int, optional
        Level of the package logger, ``logging.WARNING`` by default.
    """
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger("matomo_client").setLevel(level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=True),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@contextmanager
def logging_context(**required_context) -> Iterator[None]:
    current = structlog.contextvars.get_contextvars()
    to_bind = {k: v for k, v in required_context.items() if k not in current}

    if to_bind:
        with structlog.contextvars.bound_contextvars(**to_bind):
            yield
    else:
        yield
