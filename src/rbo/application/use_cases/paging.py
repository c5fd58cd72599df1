from __future__ import annotations

from rbo.application.errors import InvalidPageError

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


def ensure_valid_page(page: int, page_size: int) -> None:
    if page < 1:
        raise InvalidPageError("page must be >= 1")
    if page_size < 1:
        raise InvalidPageError("page size must be >= 1")
