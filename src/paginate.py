"""
paginate.py
-----------
Paginate stage plus the page reconciliation rule.
"""

from __future__ import annotations

import math
from typing import List, NamedTuple, Sequence

from src.models import Launch, PageState


class Page(NamedTuple):
    items: List[Launch]
    total_pages: int


def total_pages(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(count / page_size))


def paginate(filtered: Sequence[Launch], page_size: int, current_page: int) -> Page:
    """Slice one page. Out-of-range pages come back empty; callers reconcile first."""
    pages = total_pages(len(filtered), page_size)
    if current_page < 1:
        return Page([], pages)
    start = (current_page - 1) * page_size
    return Page(list(filtered[start:start + page_size]), pages)


def reconcile_page(page: PageState, pages: int) -> PageState:
    """Reset to page 1 whenever the current page falls outside [1, pages]."""
    if 1 <= page.current_page <= pages:
        return page
    return page.model_copy(update={"current_page": 1})
