"""회원 검색 라우터 — 검색 및 페이지 조회 엔드포인트.

Member Search Router — Search and paginated search endpoints.

Endpoints:
    - GET /api/v1/members: 전체 검색, 페이지 없음 (Unpaged search)
    - GET /api/v2/members: 단순 페이지, 카운트 쿼리 항상 실행 (Simple paging)
    - GET /api/v3/members: 최적화 페이지, 카운트 쿼리 필요할 때만 (Optimized paging)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_page_request, get_search_condition
from app.database import get_db
from app.schemas.member import (
    MemberSearchCondition,
    MemberTeamRow,
    PageRequest,
    PageResponse,
    SortOrder,
)
from app.services.member_service import member_service

router: APIRouter = APIRouter()


@router.get("/v1/members", response_model=list[MemberTeamRow])
async def search_members(
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    db: Annotated[AsyncSession, Depends(get_db)],
    sort: Annotated[list[str] | None, Query()] = None,
) -> list[MemberTeamRow]:
    """검색 조건에 맞는 회원 전체를 조회합니다.

    Search members without paging. ``sort`` is optional.
    """
    orders: list[SortOrder] = [SortOrder.parse(s) for s in sort or []]
    return await member_service.search(db, condition, orders)


@router.get("/v2/members", response_model=PageResponse)
async def search_members_page_simple(
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PageResponse:
    """단순 페이지 조회 — 컨텐츠 + 카운트 쿼리.

    Paged search; the count query always runs.
    """
    return await member_service.search_page_simple(db, condition, page_request)


@router.get("/v3/members", response_model=PageResponse)
async def search_members_page_complex(
    condition: Annotated[MemberSearchCondition, Depends(get_search_condition)],
    page_request: Annotated[PageRequest, Depends(get_page_request)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PageResponse:
    """최적화 페이지 조회 — 카운트 쿼리는 필요할 때만.

    Paged search; the count query is skipped when the total is derivable.
    """
    return await member_service.search_page_complex(db, condition, page_request)
