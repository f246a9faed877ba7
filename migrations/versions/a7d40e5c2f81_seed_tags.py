"""seed_tags

Revision ID: a7d40e5c2f81
Revises: 3f1c2a9d7b10
Create Date: 2026-10-19 09:31:07.220914

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "a7d40e5c2f81"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TAGS = [
    "career",
    "mentorship",
    "networking",
    "events",
    "reunions",
    "job-openings",
    "entrepreneurship",
    "research",
    "higher-studies",
    "campus-news",
    "volunteering",
    "general",
]


def upgrade() -> None:
    """Seed initial tags."""
    tags_table = sa.table("tags", sa.column("name", sa.String))

    op.bulk_insert(tags_table, [{"name": name} for name in TAGS])


def downgrade() -> None:
    """Remove seeded tags."""
    tags_table = sa.table("tags", sa.column("name", sa.String))

    op.execute(tags_table.delete().where(tags_table.c.name.in_(TAGS)))
