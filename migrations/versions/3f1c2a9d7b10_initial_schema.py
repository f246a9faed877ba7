"""initial_schema

Create the foundational schema for Alumni Connect:
- Alumni (directory entries)
- Tags
- Threads and thread_tags
- Thread votes (one standing up/down vote per alumnus per thread)
- Surveys, sections, questions, options
- Feedback responses and per-question answers

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    op.execute("""
        DO $$ BEGIN
            CREATE TYPE vote_choice AS ENUM ('upvote', 'downvote');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    op.execute("""
        DO $$ BEGIN
            CREATE TYPE question_type AS ENUM ('Multiple Choice', 'Open-ended', 'Rating');
        EXCEPTION
            WHEN duplicate_object THEN null;
        END $$;
    """)

    # ========================================================================
    # ALUMNI table
    # ========================================================================
    op.create_table(
        "alumni",
        _id_column(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_alumni_email"),
    )

    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_tag_name"),
    )

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        _id_column(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments_count", sa.Integer(), nullable=False, server_default="0"),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["author_id"], ["alumni.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
        sa.CheckConstraint("downvotes >= 0", name="downvotes_non_negative"),
    )
    op.create_index("idx_threads_author_id", "threads", ["author_id"])
    op.create_index(
        "idx_threads_updated_at", "threads", [sa.text("updated_at DESC")]
    )

    op.create_table(
        "thread_tags",
        sa.Column("thread_id", sa.UUID(), nullable=False),
        sa.Column("tag_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["tag_id"], ["tags.id"], ondelete="RESTRICT"),
        sa.UniqueConstraint("thread_id", "tag_id", name="uq_thread_tag"),
    )
    op.create_index("idx_thread_tags_thread_id", "thread_tags", ["thread_id"])

    # ========================================================================
    # THREAD_VOTES table
    # ========================================================================
    op.create_table(
        "thread_votes",
        _id_column(),
        sa.Column("alumni_id", sa.UUID(), nullable=False),
        sa.Column("thread_id", sa.UUID(), nullable=False),
        sa.Column(
            "choice",
            postgresql.ENUM(
                "upvote", "downvote", name="vote_choice", create_type=False
            ),
            nullable=False,
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.ForeignKeyConstraint(["alumni_id"], ["alumni.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("alumni_id", "thread_id", name="unique_thread_vote"),
    )
    op.create_index("idx_thread_votes_thread_id", "thread_votes", ["thread_id"])

    # ========================================================================
    # SURVEYS
    # ========================================================================
    op.create_table(
        "surveys",
        _id_column(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        _timestamp_column("creation_date"),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_surveys_creation_date", "surveys", [sa.text("creation_date DESC")]
    )

    op.create_table(
        "survey_sections",
        _id_column(),
        sa.Column("survey_id", sa.UUID(), nullable=False),
        sa.Column("section_title", sa.String(255), nullable=False),
        sa.Column("section_description", sa.Text(), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["survey_id"], ["surveys.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_survey_sections_survey_id", "survey_sections", ["survey_id"]
    )

    op.create_table(
        "survey_questions",
        _id_column(),
        sa.Column("survey_id", sa.UUID(), nullable=False),
        sa.Column("section_id", sa.UUID(), nullable=False),
        sa.Column("question_text", sa.String(255), nullable=False),
        sa.Column(
            "question_type",
            postgresql.ENUM(
                "Multiple Choice",
                "Open-ended",
                "Rating",
                name="question_type",
                create_type=False,
            ),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(["survey_id"], ["surveys.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["section_id"], ["survey_sections.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_survey_questions_survey_id", "survey_questions", ["survey_id"]
    )
    op.create_index(
        "idx_survey_questions_section_id", "survey_questions", ["section_id"]
    )

    op.create_table(
        "survey_options",
        _id_column(),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("option_text", sa.String(255), nullable=False),
        sa.Column("option_value", sa.Integer(), nullable=True),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(
            ["question_id"], ["survey_questions.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_survey_options_question_id", "survey_options", ["question_id"]
    )

    # ========================================================================
    # FEEDBACK RESPONSES
    # ========================================================================
    op.create_table(
        "feedback_responses",
        _id_column(),
        sa.Column("survey_id", sa.UUID(), nullable=False),
        sa.Column("alumni_id", sa.UUID(), nullable=False),
        _timestamp_column("response_date"),
        sa.ForeignKeyConstraint(["survey_id"], ["surveys.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["alumni_id"], ["alumni.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("survey_id", "alumni_id", name="unique_feedback_response"),
    )
    op.create_index(
        "idx_feedback_responses_alumni_id", "feedback_responses", ["alumni_id"]
    )

    op.create_table(
        "question_responses",
        _id_column(),
        sa.Column("response_id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("option_id", sa.UUID(), nullable=True),
        sa.Column("response_text", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["response_id"], ["feedback_responses.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["question_id"], ["survey_questions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["option_id"], ["survey_options.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_question_responses_response_id", "question_responses", ["response_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("question_responses")
    op.drop_table("feedback_responses")
    op.drop_table("survey_options")
    op.drop_table("survey_questions")
    op.drop_table("survey_sections")
    op.drop_table("surveys")
    op.drop_table("thread_votes")
    op.drop_table("thread_tags")
    op.drop_table("threads")
    op.drop_table("tags")
    op.drop_table("alumni")

    op.execute("DROP TYPE IF EXISTS question_type")
    op.execute("DROP TYPE IF EXISTS vote_choice")
