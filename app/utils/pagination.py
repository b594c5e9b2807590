"""페이지네이션 유틸리티 모듈.

Pagination utility module.
Provides the ``Page`` result type and ``get_page``, which derives the total
row count from the content size when possible and only awaits the count
supplier when it cannot.
"""

import math
from collections.abc import Awaitable, Callable
from typing import Generic, Sequence, TypeVar

from pydantic import BaseModel

from app.schemas.member import PageRequest

T = TypeVar("T")

# 카운트 쿼리 공급자 — 인자 없이 호출하면 전체 개수를 반환하는 코루틴
# Zero-argument coroutine factory returning the total row count
CountSupplier = Callable[[], Awaitable[int]]


class Page(BaseModel, Generic[T]):
    """페이지네이션 결과.

    One page of results plus the total count across all pages.

    Attributes:
        content: 현재 페이지 항목 (Items of the current page)
        offset: 시작 위치 (Row offset of the page)
        limit: 페이지 크기 (Page size)
        total: 전체 항목 수 (Total matching rows)
    """

    content: list[T]  # 현재 페이지 항목 (Items of the current page)
    offset: int  # 시작 위치 (Row offset)
    limit: int  # 페이지 크기 (Page size)
    total: int  # 전체 항목 수 (Total matching rows)

    model_config = {"frozen": True}

    @property
    def page(self) -> int:
        return self.offset // self.limit

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 1

    @property
    def is_first(self) -> bool:
        return self.offset == 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def is_last(self) -> bool:
        return not self.has_next


async def get_page(
    content: Sequence[T],
    page_request: PageRequest,
    count_supplier: CountSupplier,
) -> Page[T]:
    """컨텐츠 크기로 전체 개수를 알 수 있으면 카운트 쿼리를 생략합니다.

    Build a page, calling ``count_supplier`` only when the total cannot be
    derived from the content:

    - first page not filled: total is ``len(content)``;
    - later page, non-empty and not filled: total is ``offset + len(content)``;
    - otherwise the supplier is awaited exactly once.

    Args:
        content: 컨텐츠 쿼리 결과 (Rows returned by the content query)
        page_request: 페이지 요청 (Page descriptor)
        count_supplier: 지연 실행 카운트 쿼리 (Deferred count query)

    Returns:
        Page[T]: 페이지 결과 (Resolved page)
    """
    rows: list[T] = list(content)
    offset: int = page_request.offset
    limit: int = page_request.limit

    if offset == 0:
        if limit > len(rows):
            return Page(content=rows, offset=offset, limit=limit, total=len(rows))
        return Page(content=rows, offset=offset, limit=limit, total=await count_supplier())

    if rows and limit > len(rows):
        return Page(content=rows, offset=offset, limit=limit, total=offset + len(rows))

    return Page(content=rows, offset=offset, limit=limit, total=await count_supplier())
