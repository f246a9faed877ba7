"""SQLAlchemy table definitions for Alumni Connect.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ALUMNI TABLE (directory entries only)
# ============================================================================
alumni_table = Table(
    "alumni",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False, unique=True),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "author_id", UUID, ForeignKey("alumni.id", ondelete="CASCADE"), nullable=False
    ),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("comments_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="downvotes_non_negative"),
)

Index("idx_threads_author_id", threads_table.c.author_id)
Index("idx_threads_updated_at", threads_table.c.updated_at.desc())

# ============================================================================
# THREAD_TAGS TABLE (junction table)
# ============================================================================
thread_tags_table = Table(
    "thread_tags",
    metadata,
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column("tag_id", UUID, ForeignKey("tags.id", ondelete="RESTRICT"), nullable=False),
    UniqueConstraint("thread_id", "tag_id", name="uq_thread_tag"),
)

Index("idx_thread_tags_thread_id", thread_tags_table.c.thread_id)

# ============================================================================
# THREAD_VOTES TABLE
# ============================================================================
thread_votes_table = Table(
    "thread_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "alumni_id", UUID, ForeignKey("alumni.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "choice",
        Enum("upvote", "downvote", name="vote_choice", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("alumni_id", "thread_id", name="unique_thread_vote"),
)

Index("idx_thread_votes_thread_id", thread_votes_table.c.thread_id)

# ============================================================================
# SURVEYS
# ============================================================================
surveys_table = Table(
    "surveys",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=True),
    Column(
        "creation_date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("start_date", Date, nullable=False),
    Column("end_date", Date, nullable=False),
)

Index("idx_surveys_creation_date", surveys_table.c.creation_date.desc())

survey_sections_table = Table(
    "survey_sections",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "survey_id", UUID, ForeignKey("surveys.id", ondelete="CASCADE"), nullable=False
    ),
    Column("section_title", String(255), nullable=False),
    Column("section_description", Text, nullable=True),
    Column("position", Integer, nullable=False, server_default="0"),
)

Index("idx_survey_sections_survey_id", survey_sections_table.c.survey_id)

survey_questions_table = Table(
    "survey_questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "survey_id", UUID, ForeignKey("surveys.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "section_id",
        UUID,
        ForeignKey("survey_sections.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("question_text", String(255), nullable=False),
    Column(
        "question_type",
        Enum(
            "Multiple Choice",
            "Open-ended",
            "Rating",
            name="question_type",
            create_type=False,
        ),
        nullable=False,
    ),
    Column("position", Integer, nullable=False, server_default="0"),
)

Index("idx_survey_questions_survey_id", survey_questions_table.c.survey_id)
Index("idx_survey_questions_section_id", survey_questions_table.c.section_id)

survey_options_table = Table(
    "survey_options",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("survey_questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("option_text", String(255), nullable=False),
    Column("option_value", Integer, nullable=True),
    Column("position", Integer, nullable=False, server_default="0"),
)

Index("idx_survey_options_question_id", survey_options_table.c.question_id)

# ============================================================================
# FEEDBACK RESPONSES
# ============================================================================
feedback_responses_table = Table(
    "feedback_responses",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "survey_id", UUID, ForeignKey("surveys.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "alumni_id", UUID, ForeignKey("alumni.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "response_date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    UniqueConstraint("survey_id", "alumni_id", name="unique_feedback_response"),
)

Index("idx_feedback_responses_alumni_id", feedback_responses_table.c.alumni_id)

question_responses_table = Table(
    "question_responses",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "response_id",
        UUID,
        ForeignKey("feedback_responses.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "question_id",
        UUID,
        ForeignKey("survey_questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "option_id",
        UUID,
        ForeignKey("survey_options.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("response_text", Text, nullable=True),
)

Index("idx_question_responses_response_id", question_responses_table.c.response_id)
