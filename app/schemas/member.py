"""회원 검색 요청/응답 Pydantic 스키마 정의.

Member search request/response Pydantic schema definitions.
Includes the immutable search condition, the flat member-team projection,
the page descriptor (page/size/sort) and the paginated response wrapper.
CamelCase aliases (teamName, ageGoe, memberId, ...) are the wire names.
"""

from typing import Any, Literal, Sequence

from pydantic import BaseModel, Field

from app.config import settings
from app.utils.exceptions import BadRequestError


# === 검색 조건 (Search condition) ===

class MemberSearchCondition(BaseModel):
    """회원 검색 조건 — 모든 필드는 선택이며, 없으면 제약 없음.

    Member search condition. Every field is optional; an absent (or blank)
    field adds no constraint. Lower bound greater than upper bound is not
    validated here and simply matches nothing.

    Attributes:
        username: 회원 이름 정확히 일치 (Exact username match)
        team_name: 팀 이름 정확히 일치 (Exact team name match)
        age_goe: 최소 나이, 포함 (Age lower bound, inclusive)
        age_loe: 최대 나이, 포함 (Age upper bound, inclusive)
    """

    username: str | None = None
    team_name: str | None = Field(default=None, alias="teamName")
    age_goe: int | None = Field(default=None, alias="ageGoe")
    age_loe: int | None = Field(default=None, alias="ageLoe")

    model_config = {"frozen": True, "populate_by_name": True}


# === 결과 행 (Projection) ===

class MemberTeamRow(BaseModel):
    """회원-팀 평면 조회 결과 — 엔티티가 아닌 읽기 전용 projection.

    Flat, read-only member/team projection. Team columns are None for
    members without a team (left join).

    Attributes:
        member_id: 회원 ID (Member primary key)
        username: 회원 이름 (Username)
        age: 나이 (Age)
        team_id: 팀 ID, 팀 없으면 None (Team primary key or None)
        team_name: 팀 이름, 팀 없으면 None (Team name or None)
    """

    member_id: int = Field(alias="memberId")
    username: str
    age: int
    team_id: int | None = Field(default=None, alias="teamId")
    team_name: str | None = Field(default=None, alias="teamName")

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> "MemberTeamRow":
        """(member_id, username, age, team_id, team_name) 튜플을 변환합니다.

        Map a raw column tuple in select order to a row object.
        """
        member_id, username, age, team_id, team_name = row
        return cls(
            member_id=member_id,
            username=username,
            age=age,
            team_id=team_id,
            team_name=team_name,
        )


# === 페이지 요청 (Page descriptor) ===

class SortOrder(BaseModel):
    """정렬 조건 한 건 — 프로퍼티 이름과 방향.

    Single sort instruction. The property name is resolved against the
    projection fields by the repository, not here.

    Attributes:
        property_name: 정렬 대상 프로퍼티 (e.g. "age", "teamName")
        direction: 정렬 방향 (Sort direction)
    """

    property_name: str
    direction: Literal["asc", "desc"] = "asc"

    model_config = {"frozen": True}

    @property
    def is_ascending(self) -> bool:
        return self.direction == "asc"

    @classmethod
    def parse(cls, value: str) -> "SortOrder":
        """'age' 또는 'age,desc' 형식 문자열을 파싱합니다.

        Parse a ``property[,asc|desc]`` string. The direction keyword is
        case-insensitive.

        Raises:
            BadRequestError: 방향이 asc/desc가 아닐 때 (Unknown direction keyword)
        """
        parts: list[str] = [p.strip() for p in value.split(",")]
        direction: str = parts[1].lower() if len(parts) > 1 else "asc"
        if direction not in ("asc", "desc"):
            raise BadRequestError(f"Invalid sort direction: {parts[1]!r} (expected asc or desc)")
        return cls(property_name=parts[0], direction=direction)


class PageRequest(BaseModel):
    """페이지 요청 — 0부터 시작하는 페이지 번호와 크기, 정렬 목록.

    Page descriptor: zero-based page number, page size and sort orders.
    ``offset``/``limit`` are derived.

    Attributes:
        page: 페이지 번호, 0부터 시작 (Zero-based page number)
        size: 페이지 크기 (Rows per page)
        sort: 정렬 조건 목록, 순서대로 적용 (Sort orders, applied in order)
    """

    page: int = Field(default=0, ge=0)
    size: int = Field(default=settings.DEFAULT_PAGE_SIZE, ge=1)
    sort: list[SortOrder] = []

    model_config = {"frozen": True}

    @classmethod
    def of(cls, page: int, size: int, *sort: str) -> "PageRequest":
        """PageRequest.of(0, 10, "age,desc") 형태의 편의 생성자."""
        return cls(page=page, size=size, sort=[SortOrder.parse(s) for s in sort])

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def limit(self) -> int:
        return self.size


# === 페이지 응답 (Page response) ===

class PageResponse(BaseModel):
    """페이지네이션 응답 스키마.

    Paginated response wrapper for member search results.

    Attributes:
        content: 현재 페이지 행 목록 (Rows of the current page)
        total: 전체 행 수 (Total rows matching the condition)
        page: 현재 페이지 번호, 0부터 시작 (Zero-based page number)
        size: 페이지 크기 (Page size)
        offset: 시작 위치 (Row offset)
        total_pages: 전체 페이지 수 (Total number of pages)
        first: 첫 페이지 여부 (Whether this is the first page)
        last: 마지막 페이지 여부 (Whether this is the last page)
    """

    content: list[MemberTeamRow]
    total: int
    page: int
    size: int
    offset: int
    total_pages: int = Field(alias="totalPages")
    first: bool
    last: bool

    model_config = {"populate_by_name": True}
