import logging
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List

LOG_NAME = "chain_discovery"


def setup_logger(log_file: Path | None = None, level: int = logging.INFO) -> logging.Logger:
    """Handlers для корневого логгера пакета (src.*) и LOG_NAME."""
    fmt = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(fmt)

    for name in (LOG_NAME, "src"):
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.handlers.clear()
        for handler in handlers:
            logger.addHandler(handler)
    return logging.getLogger(LOG_NAME)


class StepOutcome:
    """Итог шага, выставляемый телом log_step."""

    def __init__(self):
        self.result = "done"


@contextmanager
def log_step(message: str, logger: logging.Logger | None = None) -> Iterator[StepOutcome]:
    """
    Логирование шага: '<message>...' на входе, '<message>: <result>' на выходе.

    Ошибка внутри шага логируется с именем шага и пробрасывается дальше.
    """
    logger = logger or logging.getLogger(LOG_NAME)
    outcome = StepOutcome()
    logger.info("%s...", message)
    started = time.perf_counter()
    try:
        yield outcome
    except Exception:
        logger.error("%s: failed", message, exc_info=True)
        raise
    logger.info("%s: %s (%.3fs)", message, outcome.result, time.perf_counter() - started)
