"""create users and student_profiles

Revision ID: 5b2e81c0d4a7
Revises:
Create Date: 2026-10-18 10:12:44.310218

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "5b2e81c0d4a7"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=False),
        sa.Column(
            "role", sa.Enum("ADMIN", "STUDENT", name="role_enum"), nullable=False
        ),
        sa.Column(
            "is_active", sa.Boolean(), nullable=False, server_default=sa.text("TRUE")
        ),
        sa.Column(
            "is_email_verified",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("FALSE"),
        ),
        sa.Column("last_login", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status_last_reviewed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "status_last_reviewer_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "student_profiles",
        sa.Column(
            "user_id",
            sa.Integer(),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("gender", sa.String(length=10)),
        sa.Column("phone", sa.String(length=20)),
        sa.Column("dob", sa.Date()),
        sa.Column("class_name", sa.String(length=50)),
        sa.Column("section_name", sa.String(length=50)),
        sa.Column("roll", sa.Integer()),
        sa.Column("admission_date", sa.Date()),
        sa.Column("current_address", sa.String(length=50)),
        sa.Column("permanent_address", sa.String(length=50)),
        sa.Column("father_name", sa.String(length=50)),
        sa.Column("father_phone", sa.String(length=20)),
        sa.Column("mother_name", sa.String(length=50)),
        sa.Column("mother_phone", sa.String(length=20)),
        sa.Column("guardian_name", sa.String(length=50)),
        sa.Column("guardian_phone", sa.String(length=20)),
        sa.Column("relation_of_guardian", sa.String(length=30)),
        *_timestamps(),
    )
    op.create_index(
        "ix_student_profiles_class_name", "student_profiles", ["class_name"]
    )
    op.create_index(
        "ix_student_profiles_section_name", "student_profiles", ["section_name"]
    )


def downgrade():
    op.drop_index("ix_student_profiles_section_name", table_name="student_profiles")
    op.drop_index("ix_student_profiles_class_name", table_name="student_profiles")
    op.drop_table("student_profiles")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    sa.Enum(name="role_enum").drop(op.get_bind(), checkfirst=True)
