"""회원 레포지토리 — 동적 검색 조건과 페이지네이션 쿼리.

Member Repository — Dynamic search predicates and paginated queries.
Each optional search field maps to a predicate function that returns None
when the field is absent; the non-None predicates are ANDed. Results are a
flat member/team projection over ``members LEFT OUTER JOIN teams`` so that
members without a team are kept.

Paging strategies:
    - search_page_simple: 컨텐츠 쿼리 + 카운트 쿼리 항상 실행 (always two queries)
    - search_page_complex: 카운트 쿼리는 필요할 때만 실행 (count query only when needed)
"""

import logging
from typing import Any, Sequence

from sqlalchemy import ColumnElement, Select, and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.member import Member, Team
from app.repositories.base import BaseRepository
from app.schemas.member import MemberSearchCondition, MemberTeamRow, PageRequest, SortOrder
from app.utils.exceptions import InvalidSortFieldError
from app.utils.pagination import Page, get_page

logger = logging.getLogger(__name__)

Predicate = ColumnElement[bool]

# 정렬 가능한 projection 프로퍼티 → 컬럼 매핑 (camelCase 및 snake_case 모두 허용)
# Sortable projection properties mapped to columns (camelCase and snake_case)
SORTABLE_COLUMNS: dict[str, Any] = {
    "memberId": Member.id,
    "member_id": Member.id,
    "username": Member.username,
    "age": Member.age,
    "teamId": Team.id,
    "team_id": Team.id,
    "teamName": Team.name,
    "team_name": Team.name,
}


# ---------------------------------------------------------------------------
# 조건별 Predicate — None이면 조건 없음 (None means "no constraint")
# ---------------------------------------------------------------------------
def _has_text(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def username_eq(username: str | None) -> Predicate | None:
    return Member.username == username if _has_text(username) else None


def team_name_eq(team_name: str | None) -> Predicate | None:
    return Team.name == team_name if _has_text(team_name) else None


def age_loe(age_loe: int | None) -> Predicate | None:
    return Member.age <= age_loe if age_loe is not None else None


def age_goe(age_goe: int | None) -> Predicate | None:
    return Member.age >= age_goe if age_goe is not None else None


def search_predicates(condition: MemberSearchCondition) -> list[Predicate | None]:
    """검색 조건의 각 필드를 Predicate 목록으로 변환합니다 (None 포함).

    Map every condition field to its predicate, keeping None placeholders.
    """
    return [
        username_eq(condition.username),
        team_name_eq(condition.team_name),
        age_loe(condition.age_loe),
        age_goe(condition.age_goe),
    ]


def all_of(*predicates: Predicate | None) -> Predicate | None:
    """None을 제외한 Predicate를 AND로 결합합니다. 모두 None이면 None.

    Fold the present predicates with AND; None when every one is absent.
    """
    present: list[Predicate] = [p for p in predicates if p is not None]
    if not present:
        return None
    if len(present) == 1:
        return present[0]
    return and_(*present)


def resolve_sort(sort: Sequence[SortOrder]) -> list[Any]:
    """정렬 조건을 ORDER BY 절로 변환합니다.

    Resolve sort orders against the projection fields.

    Raises:
        InvalidSortFieldError: 존재하지 않는 프로퍼티 (Unknown property)
    """
    clauses: list[Any] = []
    for order in sort:
        column = SORTABLE_COLUMNS.get(order.property_name)
        if column is None:
            raise InvalidSortFieldError(order.property_name)
        clauses.append(column.asc() if order.is_ascending else column.desc())
    return clauses


class MemberRepository(BaseRepository[Member]):
    """회원 검색 쿼리를 담당하는 레포지토리.

    Repository for member search queries. Stateless; a single instance is
    shared across requests while each call receives its own session.
    """

    def __init__(self) -> None:
        super().__init__(Member)

    def _content_query(self, condition: MemberSearchCondition) -> Select:
        """회원-팀 projection 컨텐츠 쿼리 (페이지/정렬 미적용).

        Projection query over members left-joined to teams, filters applied.
        """
        query: Select = (
            select(
                Member.id.label("member_id"),
                Member.username,
                Member.age,
                Team.id.label("team_id"),
                Team.name.label("team_name"),
            )
            .select_from(Member)
            .outerjoin(Member.team)
        )
        where: Predicate | None = all_of(*search_predicates(condition))
        if where is not None:
            query = query.where(where)
        return query

    def _count_query(self, condition: MemberSearchCondition) -> Select:
        """회원 ID 기준 카운트 쿼리.

        Count by member id with the same filters. The team join is kept so the
        team-name predicate stays valid; a many-to-one join never adds rows.
        """
        query: Select = (
            select(func.count(Member.id))
            .select_from(Member)
            .outerjoin(Member.team)
        )
        where: Predicate | None = all_of(*search_predicates(condition))
        if where is not None:
            query = query.where(where)
        return query

    async def count_by_condition(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
    ) -> int:
        """검색 조건에 맞는 회원 수를 반환합니다.

        Run the count query for ``condition``.
        """
        result = await db.execute(self._count_query(condition))
        return result.scalar() or 0

    async def search(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        sort: Sequence[SortOrder] = (),
    ) -> list[MemberTeamRow]:
        """검색 조건에 맞는 회원-팀 행 전체를 조회합니다.

        Return every row matching ``condition``. Without ``sort`` the order is
        whatever the database yields and must not be relied on.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)
            sort: 선택 정렬 조건 (Optional sort orders)

        Returns:
            list[MemberTeamRow]: 조회 결과 (Matching rows)

        Raises:
            InvalidSortFieldError: 정렬 프로퍼티가 없을 때, 쿼리 실행 전 (Before querying)
        """
        order_by: list[Any] = resolve_sort(sort)
        query: Select = self._content_query(condition)
        if order_by:
            query = query.order_by(*order_by)
        result = await db.execute(query)
        return [MemberTeamRow.from_row(row) for row in result.all()]

    async def _fetch_content(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
        order_by: list[Any],
    ) -> list[MemberTeamRow]:
        query: Select = self._content_query(condition)
        if order_by:
            query = query.order_by(*order_by)
        query = query.offset(page_request.offset).limit(page_request.limit)
        result = await db.execute(query)
        return [MemberTeamRow.from_row(row) for row in result.all()]

    async def search_page_simple(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page[MemberTeamRow]:
        """컨텐츠 쿼리와 카운트 쿼리를 모두 실행하는 단순 페이지 조회.

        Simple paging: content query with offset/limit/sort, then an
        unconditional count query. Always exactly two queries.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)
            page_request: 페이지 요청 (Page descriptor)

        Returns:
            Page[MemberTeamRow]: 페이지 결과, total은 카운트 쿼리 값 (Exact total)

        Raises:
            InvalidSortFieldError: 정렬 프로퍼티가 없을 때, 쿼리 실행 전 (Before querying)
        """
        order_by: list[Any] = resolve_sort(page_request.sort)
        content: list[MemberTeamRow] = await self._fetch_content(
            db, condition, page_request, order_by
        )
        total: int = await self.count_by_condition(db, condition)
        return Page(
            content=content,
            offset=page_request.offset,
            limit=page_request.limit,
            total=total,
        )

    async def search_page_complex(
        self,
        db: AsyncSession,
        condition: MemberSearchCondition,
        page_request: PageRequest,
    ) -> Page[MemberTeamRow]:
        """카운트 쿼리를 필요할 때만 실행하는 최적화 페이지 조회.

        Optimized paging: the count query is wrapped in a zero-argument
        supplier and only awaited when the total cannot be derived from the
        content size (see ``get_page``).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            condition: 검색 조건 (Search condition)
            page_request: 페이지 요청 (Page descriptor)

        Returns:
            Page[MemberTeamRow]: 페이지 결과 (Resolved page)

        Raises:
            InvalidSortFieldError: 정렬 프로퍼티가 없을 때, 쿼리 실행 전 (Before querying)
        """
        order_by: list[Any] = resolve_sort(page_request.sort)
        content: list[MemberTeamRow] = await self._fetch_content(
            db, condition, page_request, order_by
        )

        async def count_supplier() -> int:
            logger.debug("Count query required for page %s", page_request.page)
            return await self.count_by_condition(db, condition)

        return await get_page(content, page_request, count_supplier)


# 싱글턴 인스턴스 — Singleton instance
member_repository: MemberRepository = MemberRepository()
