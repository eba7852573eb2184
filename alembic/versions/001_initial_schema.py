"""Initial schema - parent_document and document_version.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "parent_document",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        "document_version",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column(
            "parent_id",
            sa.String(64),
            sa.ForeignKey("parent_document.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("version_number", sa.Integer(), nullable=False),
        sa.Column("change_description", sa.Text(), nullable=False, server_default=""),
        sa.Column("original_name", sa.String(512), nullable=False),
        sa.Column("mime_type", sa.String(255), nullable=False),
        sa.Column("size_bytes", sa.BigInteger(), nullable=False),
        sa.Column("checksum", sa.String(128), nullable=False),
        sa.Column("storage_key", sa.String(1024), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("version_number > 0", name="ck_document_version_number_positive"),
        sa.CheckConstraint(
            "status IN ('draft', 'approved', 'deprecated')",
            name="ck_document_version_status",
        ),
        sa.UniqueConstraint("parent_id", "version_number", name="uq_document_version_parent_number"),
    )
    op.create_index("ix_document_version_parent_id", "document_version", ["parent_id"])


def downgrade() -> None:
    op.drop_index("ix_document_version_parent_id", table_name="document_version")
    op.drop_table("document_version")
    op.drop_table("parent_document")
