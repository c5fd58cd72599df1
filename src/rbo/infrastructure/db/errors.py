from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from pymongo.errors import (
    DuplicateKeyError,
    OperationFailure,
    PyMongoError,
    ServerSelectionTimeoutError,
)

from rbo.application.ports.repositories import (
    DuplicateRecordError,
    PipelineError,
    StoreError,
    StoreTimeoutError,
)


@contextmanager
def translate_store_errors(operation: str, *, pipeline: bool = False) -> Iterator[None]:
    """Re-raise driver errors as the store errors the application layer understands.

    ``pipeline`` marks aggregation calls: a server-side failure there becomes
    ``PipelineError`` rather than a plain ``StoreError``.
    """
    try:
        yield
    except DuplicateKeyError as exc:
        raise DuplicateRecordError(f"{operation}: duplicate record") from exc
    except ServerSelectionTimeoutError as exc:
        raise StoreError(f"{operation}: store unavailable") from exc
    except PyMongoError as exc:
        if exc.timeout:
            raise StoreTimeoutError(f"{operation}: store budget exceeded") from exc
        if pipeline and isinstance(exc, OperationFailure):
            raise PipelineError(f"{operation}: {exc}") from exc
        raise StoreError(f"{operation}: {exc}") from exc
