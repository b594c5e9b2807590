"""테스트 인프라 — 인메모리 SQLite DB, 세션, 쿼리 기록기, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, statement recorder and
httpx client fixtures. Every test gets a fresh database (engine per test).
Set TEST_DATABASE_URL to run against another async database.
"""

import os

# app.config가 임포트되기 전에 DB URL을 지정 — must precede app imports
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.models.member import Member, Team  # noqa: E402

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


class QueryRecorder:
    """엔진에서 실행된 SQL 문을 기록합니다.

    Records every SQL statement sent to the database.
    """

    def __init__(self) -> None:
        self.statements: list[str] = []
        self.enabled: bool = False

    def record(self, conn, cursor, statement, parameters, context, executemany) -> None:
        if self.enabled:
            self.statements.append(statement)

    def start(self) -> "QueryRecorder":
        self.statements.clear()
        self.enabled = True
        return self

    @property
    def selects(self) -> list[str]:
        return [s for s in self.statements if s.lstrip().upper().startswith("SELECT")]

    @property
    def count_queries(self) -> list[str]:
        return [s for s in self.selects if "count(" in s.lower()]

    @property
    def content_queries(self) -> list[str]:
        return [s for s in self.selects if "count(" not in s.lower()]


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    options = {}
    if TEST_DATABASE_URL.startswith("sqlite"):
        options = {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    eng = create_async_engine(TEST_DATABASE_URL, echo=False, **options)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest.fixture
def recorder(engine: AsyncEngine):
    """SQL 실행 기록기 — recorder.start() 이후의 문장만 기록합니다."""
    rec = QueryRecorder()
    event.listen(engine.sync_engine, "before_cursor_execute", rec.record)
    yield rec
    event.remove(engine.sync_engine, "before_cursor_execute", rec.record)


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def teams(db: AsyncSession) -> dict[str, Team]:
    """teamA, teamB를 생성합니다."""
    result = {}
    for name in ("teamA", "teamB"):
        team = Team(name=name)
        db.add(team)
        await db.flush()
        result[name] = team
    return result


@pytest_asyncio.fixture
async def members(db: AsyncSession, teams) -> list[Member]:
    """member1..4 (10, 20 → teamA / 30, 40 → teamB)를 순서대로 생성합니다."""
    data = [
        ("member1", 10, "teamA"),
        ("member2", 20, "teamA"),
        ("member3", 30, "teamB"),
        ("member4", 40, "teamB"),
    ]
    result = []
    for username, age, team_name in data:
        member = Member(username=username, age=age, team_id=teams[team_name].id)
        db.add(member)
        await db.flush()
        result.append(member)
    return result


@pytest_asyncio.fixture
async def loner(db: AsyncSession, members) -> Member:
    """팀이 없는 회원 (member5, 50)을 추가합니다."""
    member = Member(username="member5", age=50)
    db.add(member)
    await db.flush()
    return member
