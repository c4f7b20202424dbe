"""Collect complete result sets from size-limited endpoints."""

import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")


async def fetch_all_pages(
    fetch_page: Callable[[int], Awaitable[list[T]]],
    limit: int,
    description: str = "results",
) -> list[T]:
    """
    Fetch pages sequentially until a page comes back short.

    A page holding exactly `limit` items means there may be more, so the
    next page is requested at offset + limit. A short or empty page ends the
    loop. Any error aborts the whole fetch; partial results are discarded.

    Args:
        fetch_page: Coroutine function returning the page starting at an offset.
        limit: Page size every call to fetch_page requests.
        description: Label used in log messages.

    Returns:
        All items, in server order.
    """
    if limit <= 0:
        raise ValueError(f"Page limit must be positive, got {limit}")

    results: list[T] = []
    offset = 0
    pages = 0
    while True:
        page = await fetch_page(offset)
        pages += 1
        results.extend(page)
        logger.debug(f"  {description}: page at offset {offset} returned {len(page)}")
        if len(page) != limit:
            break
        offset += limit

    logger.info(f"Fetched {len(results)} {description} in {pages} page(s)")
    return results
