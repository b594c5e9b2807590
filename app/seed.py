"""샘플 데이터 시드 스크립트 — 팀 2개, 회원 100명 생성.

Seed script — Creates sample teams and members for local runs.

Usage:
    python -m app.seed

Creates:
    - 2개 팀: teamA, teamB (2 teams)
    - 100명 회원: member0..member99, 나이 = i, 짝수는 teamA / 홀수는 teamB
      (100 members, age = i, even -> teamA, odd -> teamB)
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.database import async_session, engine, Base
from app.models import Member, Team
from app.repositories.member_repository import member_repository
from app.repositories.team_repository import team_repository

logger = logging.getLogger(__name__)

SAMPLE_MEMBER_COUNT: int = 100


async def seed_members(db: AsyncSession, count: int = SAMPLE_MEMBER_COUNT) -> bool:
    """세션에 샘플 팀/회원을 추가합니다. 회원이 이미 있으면 건너뜁니다.

    Add the sample teams and members to ``db`` (flushed, not committed).

    Returns:
        bool: 시드 수행 여부 (True when data was inserted)
    """
    if await member_repository.count(db) > 0:
        return False

    team_a: Team = await team_repository.create(db, {"name": "teamA"})
    team_b: Team = await team_repository.create(db, {"name": "teamB"})

    for i in range(count):
        team: Team = team_a if i % 2 == 0 else team_b
        db.add(Member(username=f"member{i}", age=i, team_id=team.id))
    await db.flush()
    return True


async def seed() -> None:
    """데이터베이스를 샘플 데이터로 시드합니다.

    Create tables if they don't exist and insert the sample data.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if not await seed_members(db):
            logger.info("Already seeded. Skipping.")
            return
        await db.commit()
        logger.info("Seeded teamA, teamB and %d members", SAMPLE_MEMBER_COUNT)


if __name__ == "__main__":
    from app.utils.logger import setup_logging

    setup_logging()
    asyncio.run(seed())
