"""Create notes and event_log tables

Revision ID: 0001
Revises:
Create Date: 2026-10-18 00:00:00
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

EVENT_ACTIONS = (
    "video_viewed",
    "comments_viewed",
    "notes_viewed",
    "note_created",
    "note_updated",
    "note_deleted",
    "comment_added",
    "comment_deleted",
    "video_updated",
)


def upgrade() -> None:
    op.create_table(
        "notes",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("video_id", sa.String(length=64), nullable=False),
        sa.Column("title", sa.String(length=500), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_notes_video_id", "notes", ["video_id"])
    op.create_index("ix_notes_created_at", "notes", ["created_at"])

    op.create_table(
        "event_log",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "action",
            sa.Enum(
                *EVENT_ACTIONS,
                name="event_action_enum",
                native_enum=False,
                length=50,
            ),
            nullable=False,
        ),
        sa.Column("video_id", sa.String(length=64), nullable=False),
        sa.Column("details", sa.JSON(), nullable=False),
        sa.Column("timestamp", sa.DateTime(), nullable=False),
    )
    op.create_index("ix_event_log_video_id", "event_log", ["video_id"])
    op.create_index("ix_event_log_timestamp", "event_log", ["timestamp"])


def downgrade() -> None:
    op.drop_index("ix_event_log_timestamp", table_name="event_log")
    op.drop_index("ix_event_log_video_id", table_name="event_log")
    op.drop_table("event_log")
    op.drop_index("ix_notes_created_at", table_name="notes")
    op.drop_index("ix_notes_video_id", table_name="notes")
    op.drop_table("notes")
