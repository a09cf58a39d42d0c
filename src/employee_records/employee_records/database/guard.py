from __future__ import annotations

import logging
import re
from contextlib import contextmanager
from typing import Iterator

from ..core.exceptions import ConflictError, OperationFailed, StoreUnavailable
from .errors import DuplicateKeyError, StoreConnectionError, StoreError

_UNIQUE_PREFIX = re.compile(r"^uq_[a-z]+_")


def duplicate_key_label(key: str) -> str:
    label = _UNIQUE_PREFIX.sub("", key or "")
    return label.replace("_", " ") or "key"


@contextmanager
def store_operation(verb: str, entity: str, *, logger: logging.Logger) -> Iterator[None]:
    """Turn store errors raised inside the block into tagged domain errors.

    Duplicate keys keep their detail (ConflictError); anything else is logged with
    its traceback and replaced by an entity-scoped "Failed to <verb> <entity>".
    """

    try:
        yield
    except DuplicateKeyError as exc:
        label = duplicate_key_label(exc.key)
        logger.warning("Conflict trying to %s %s: duplicate %s", verb, entity, label)
        raise ConflictError(f"Failed to {verb} {entity}: duplicate {label}") from exc
    except StoreConnectionError as exc:
        logger.exception("Store unavailable trying to %s %s", verb, entity)
        raise StoreUnavailable(verb, entity) from exc
    except StoreError as exc:
        logger.exception("Error trying to %s %s", verb, entity)
        raise OperationFailed(verb, entity) from exc
