"""회원/팀 SQLAlchemy ORM 모델 정의.

Member and Team SQLAlchemy ORM model definitions.
A member belongs to at most one team (many-to-one); a team owns many members.

Tables:
    - teams: 팀 (Team)
    - members: 회원, team_id는 NULL 허용 (Member, team_id is nullable)
"""

from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base


class Team(Base):
    """팀 모델.

    Team model — groups members.

    Attributes:
        id: 팀 식별자 (Team primary key)
        name: 팀 이름 (Team name)

    Relationships:
        members: 소속 회원 목록 (Members of this team)
    """

    __tablename__ = "teams"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    members = relationship("Member", back_populates="team")

    def __repr__(self) -> str:
        return f"Team(id={self.id}, name={self.name!r})"


class Member(Base):
    """회원 모델.

    Member model. ``team_id`` is nullable so a member can exist without a team;
    searches left-join the team to keep those rows.

    Attributes:
        id: 회원 식별자 (Member primary key)
        username: 회원 이름 (Username, not unique)
        age: 나이 (Age)
        team_id: 소속 팀 FK (Team foreign key, nullable)

    Relationships:
        team: 소속 팀 (Owning team, may be None)
    """

    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # 소속 팀 FK — 팀 삭제 시 회원은 팀 없음 상태로 남음 (SET NULL)
    team_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("teams.id", ondelete="SET NULL"), nullable=True, index=True
    )

    team = relationship("Team", back_populates="members")

    def change_team(self, team: Team) -> None:
        """팀을 변경하고 양방향 관계를 함께 맞춥니다.

        Move the member to ``team``. ``back_populates`` appends the member to
        ``team.members`` (or queues the append when the collection is unloaded),
        so no lazy load is triggered under an async session.
        """
        self.team = team

    def __repr__(self) -> str:
        return f"Member(id={self.id}, username={self.username!r}, age={self.age})"
