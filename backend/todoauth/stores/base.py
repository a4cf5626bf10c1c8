# todoauth/stores/base.py
import logging
from contextlib import contextmanager

from tortoise.exceptions import BaseORMException, IntegrityError

from todoauth.core.errors import Conflict, StorageError

logger = logging.getLogger("uvicorn.error")


@contextmanager
def storage_errors(operation: str, conflict_message: str | None = None):
    """
    Translate ORM failures raised inside the block.

    IntegrityError becomes Conflict(conflict_message) when a message is given;
    every other ORM failure is logged with its traceback and re-raised as
    StorageError so nothing ORM-specific reaches a client.
    """
    try:
        yield
    except IntegrityError as exc:
        if conflict_message is not None:
            raise Conflict(conflict_message) from exc
        logger.error("[store] %s failed: integrity error", operation, exc_info=True)
        raise StorageError() from exc
    except BaseORMException as exc:
        logger.error("[store] %s failed", operation, exc_info=True)
        raise StorageError() from exc
