"""Initial member schema.

Revision ID: 0001
Revises: None
Create Date: 2026-10-19

Member Domain Migration
Schema: member.*
"""

from typing import Sequence

from alembic import op

revision: str = "0001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create member schema tables."""
    op.execute("CREATE SCHEMA IF NOT EXISTS member")

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE member.social_type AS ENUM ('KAKAO', 'APPLE', 'GOOGLE');
        EXCEPTION WHEN duplicate_object THEN NULL;
        END $$;
    """)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE member.member_role AS ENUM ('USER', 'ADMIN');
        EXCEPTION WHEN duplicate_object THEN NULL;
        END $$;
    """)

    # ============================================
    # member.members 테이블
    # ============================================
    op.execute("""
        CREATE TABLE IF NOT EXISTS member.members (
            id UUID PRIMARY KEY,
            social_id TEXT NOT NULL,
            social_type member.social_type NOT NULL,
            email TEXT NOT NULL,
            nickname TEXT NOT NULL,
            image_url TEXT,
            role member.member_role NOT NULL DEFAULT 'USER',
            oauth_refresh_token TEXT,
            deleted BOOLEAN NOT NULL DEFAULT FALSE,
            deleted_at TIMESTAMPTZ,
            created_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT NOW(),

            CONSTRAINT uq_members_social_id_social_type UNIQUE (social_id, social_type),
            CONSTRAINT uq_members_email UNIQUE (email),
            CONSTRAINT uq_members_nickname UNIQUE (nickname),
            CONSTRAINT ck_members_deleted_at CHECK (deleted = (deleted_at IS NOT NULL))
        )
    """)


def downgrade() -> None:
    """Drop member schema tables."""
    op.execute("DROP TABLE IF EXISTS member.members")
    op.execute("DROP TYPE IF EXISTS member.member_role")
    op.execute("DROP TYPE IF EXISTS member.social_type")
