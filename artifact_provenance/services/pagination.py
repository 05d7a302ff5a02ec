"""
Numbered-page collection fetcher.

Fetches page 1, 2, ... sequentially until a page holds fewer than
``page_size`` items. A failed page aborts the sequence; whatever was
accumulated is returned together with the failure.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from artifact_provenance.common.observability import get_logger
from artifact_provenance.domain.results import FetchFailure, FetchResult, Ok

logger = get_logger(__name__)

T = TypeVar("T")

PageFetcher = Callable[[int], Awaitable[FetchResult[list[T]]]]


@dataclass
class PageCollection(Generic[T]):
    """Concatenated pages plus the failure that cut pagination short, if any."""

    items: list[T] = field(default_factory=list)
    pages_fetched: int = 0
    failure: FetchFailure | None = None

    @property
    def complete(self) -> bool:
        return self.failure is None


async def fetch_all_pages(
    fetch_page: PageFetcher[T],
    page_size: int,
    *,
    label: str = "collection",
) -> PageCollection[T]:
    """
    Fetch every page of a numbered collection.

    Args:
        fetch_page: page number (1-based) -> tagged result with that page's items
        page_size: requested items per page; a shorter page ends pagination
        label: name used in log lines

    Returns:
        PageCollection with the items in page order. Never raises on fetch failure.
    """
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    collection: PageCollection[T] = PageCollection()
    page = 1

    while True:
        result = await fetch_page(page)
        collection.pages_fetched += 1

        match result:
            case Ok(value=items):
                collection.items.extend(items)
                if len(items) < page_size:
                    break
                page += 1
            case _:
                collection.failure = result
                logger.warning(
                    "pagination_aborted",
                    collection=label,
                    page=page,
                    items_so_far=len(collection.items),
                    reason=result.describe(),
                )
                break

    return collection
