"""회원 검색 서비스 — 검색/페이지 조회 비즈니스 로직.

Member Search Service — Orchestrates member searches and converts
repository pages into API response schemas.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.repositories.member_repository import member_repository
from app.schemas.member import (
    MemberSearchCondition,
    MemberTeamRow,
    PageRequest,
    PageResponse,
    SortOrder,
)
from app.utils.pagination import Page

logger = logging.getLogger(__name__)


class MemberService:
    """회원 검색 관련 비즈니스 로직을 처리하는 서비스.

    Service handling member search. Read-only: no method commits.
    """

    def _to_response(self, page: Page[MemberTeamRow]) -> PageResponse:
        """Page를 응답 스키마로 변환합니다.

        Convert a repository Page into a PageResponse.
        """
        return PageResponse(
            content=page.content,
            total=page.total,
            page=page.page,
            size=page.limit,
            offset=page.offset,
            total_pages=page.total_pages,
            first=page.is_first,
            last=page.is_last,
        )

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        sort: list[SortOrder] | None = None,
    ) -> list[MemberTeamRow]:
        """조건에 맞는 회원 전체를 조회합니다 (페이지 없음).

        Search members without paging.
        """
        rows: list[MemberTeamRow] = await member_repository.search(db, condition, sort or [])
        logger.info("Member search %s returned %d rows", condition.model_dump(exclude_none=True), len(rows))
        return rows

    async def search_page_simple(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> PageResponse:
        """카운트 쿼리를 항상 실행하는 페이지 조회.

        Paged search that always runs the count query.
        """
        page: Page[MemberTeamRow] = await member_repository.search_page_simple(
            db, condition, page_request
        )
        logger.info(
            "Simple page %d/%d: %d rows, total=%d",
            page.page, page.total_pages, len(page.content), page.total,
        )
        return self._to_response(page)

    async def search_page_complex(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> PageResponse:
        """필요할 때만 카운트 쿼리를 실행하는 페이지 조회.

        Paged search that skips the count query when the total is derivable.
        """
        page: Page[MemberTeamRow] = await member_repository.search_page_complex(
            db, condition, page_request
        )
        logger.info(
            "Optimized page %d/%d: %d rows, total=%d",
            page.page, page.total_pages, len(page.content), page.total,
        )
        return self._to_response(page)


# 싱글턴 인스턴스 — Singleton instance
member_service: MemberService = MemberService()
