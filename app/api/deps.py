"""FastAPI 의존성 주입 모듈 — 검색 조건 및 페이지 요청 파싱.

FastAPI dependency injection module.
Builds the immutable search condition and the page descriptor from
query-string parameters (username, teamName, ageGoe, ageLoe, page, size, sort).
"""

from typing import Annotated

from fastapi import Query

from app.config import settings
from app.schemas.member import MemberSearchCondition, PageRequest, SortOrder


def get_search_condition(
    username: Annotated[str | None, Query()] = None,
    team_name: Annotated[str | None, Query(alias="teamName")] = None,
    age_goe: Annotated[int | None, Query(alias="ageGoe")] = None,
    age_loe: Annotated[int | None, Query(alias="ageLoe")] = None,
) -> MemberSearchCondition:
    """쿼리 파라미터로 검색 조건을 생성합니다.

    Build a MemberSearchCondition from camelCase query parameters.
    """
    return MemberSearchCondition(
        username=username,
        team_name=team_name,
        age_goe=age_goe,
        age_loe=age_loe,
    )


def get_page_request(
    page: Annotated[int, Query(ge=0)] = 0,
    size: Annotated[int, Query(ge=1, le=settings.MAX_PAGE_SIZE)] = settings.DEFAULT_PAGE_SIZE,
    sort: Annotated[list[str] | None, Query()] = None,
) -> PageRequest:
    """쿼리 파라미터로 페이지 요청을 생성합니다.

    Build a PageRequest; ``sort`` is repeatable, e.g. ``sort=age,desc&sort=username``.
    Sort property names are validated later by the repository.
    """
    return PageRequest(
        page=page,
        size=size,
        sort=[SortOrder.parse(s) for s in sort or []],
    )
