"""페이지네이션 유틸리티 단위 테스트.

Unit tests for get_page: when the count supplier is awaited and when the
total is derived from the content size.
"""

import pytest
from pydantic import ValidationError

from app.schemas.member import PageRequest
from app.utils.pagination import Page, get_page


class CountingSupplier:
    """호출 횟수를 기록하는 카운트 공급자."""

    def __init__(self, total: int) -> None:
        self.total = total
        self.calls = 0

    async def __call__(self) -> int:
        self.calls += 1
        return self.total


class TestGetPage:
    """get_page 카운트 생략 규칙 테스트."""

    async def test_first_page_not_filled_skips_count(self):
        supplier = CountingSupplier(total=999)
        page = await get_page(["a", "b"], PageRequest(page=0, size=10), supplier)
        assert page.total == 2
        assert supplier.calls == 0

    async def test_first_page_filled_runs_count(self):
        supplier = CountingSupplier(total=7)
        page = await get_page(["a", "b", "c"], PageRequest(page=0, size=3), supplier)
        assert page.total == 7
        assert supplier.calls == 1

    async def test_empty_first_page_skips_count(self):
        supplier = CountingSupplier(total=999)
        page = await get_page([], PageRequest(page=0, size=5), supplier)
        assert page.total == 0
        assert supplier.calls == 0

    async def test_partial_last_page_derives_total(self):
        supplier = CountingSupplier(total=999)
        page = await get_page(["g"], PageRequest(page=2, size=3), supplier)
        assert page.total == 7
        assert supplier.calls == 0

    async def test_full_later_page_runs_count(self):
        supplier = CountingSupplier(total=9)
        page = await get_page(["d", "e", "f"], PageRequest(page=1, size=3), supplier)
        assert page.total == 9
        assert supplier.calls == 1

    async def test_empty_later_page_runs_count(self):
        supplier = CountingSupplier(total=4)
        page = await get_page([], PageRequest(page=5, size=3), supplier)
        assert page.total == 4
        assert supplier.calls == 1


class TestPage:
    """Page 파생 속성 테스트."""

    def test_metadata(self):
        page = Page(content=["d", "e", "f"], offset=3, limit=3, total=7)
        assert page.page == 1
        assert page.total_pages == 3
        assert page.is_first is False
        assert page.has_next is True
        assert page.is_last is False

    @pytest.mark.parametrize("total, pages", [(0, 0), (1, 1), (10, 1), (11, 2)])
    def test_total_pages(self, total, pages):
        assert Page(content=[], offset=0, limit=10, total=total).total_pages == pages

    def test_single_page_is_first_and_last(self):
        page = Page(content=["a"], offset=0, limit=10, total=1)
        assert page.is_first and page.is_last

    def test_is_frozen(self):
        page = Page[str](content=["a"], offset=0, limit=10, total=1)
        with pytest.raises(ValidationError):
            page.total = 2
