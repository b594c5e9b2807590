"""create_teams_and_members

Revision ID: c0a1b2d3e4f5
Revises:
Create Date: 2026-10-19 10:00:00.000000

팀(teams) 및 회원(members) 테이블 생성.
Create teams and members tables. members.team_id is nullable so a member
can exist without a team.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'c0a1b2d3e4f5'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # teams — 팀
    op.create_table(
        'teams',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
    )

    # members — 회원 (팀 삭제 시 team_id는 NULL)
    # Members; team_id set to NULL when the team is deleted
    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(255), nullable=False),
        sa.Column('age', sa.Integer(), server_default='0', nullable=False),
        sa.Column('team_id', sa.Integer(), sa.ForeignKey('teams.id', ondelete='SET NULL'), nullable=True),
    )

    # 인덱스 — Indexes
    op.create_index('ix_members_team_id', 'members', ['team_id'])


def downgrade() -> None:
    op.drop_index('ix_members_team_id', table_name='members')
    op.drop_table('members')
    op.drop_table('teams')
