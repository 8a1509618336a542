"""Initial schema: drivers, passengers, reviews, bookings, students, courses.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "drivers",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("license_number", sa.String(64), nullable=False),
    )
    op.create_index("ix_drivers_id", "drivers", ["id"])
    op.create_index("ix_drivers_license_number", "drivers", ["license_number"], unique=True)

    op.create_table("passengers", *_audit_columns())
    op.create_index("ix_passengers_id", "passengers", ["id"])

    # Review and PassengerReview share this table; review_type tells them apart
    op.create_table(
        "booking_reviews",
        *_audit_columns(),
        sa.Column("content", sa.String(1000), nullable=False),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("review_type", sa.String(32), nullable=False),
        sa.Column("passenger_comment", sa.String(1000), nullable=True),
    )
    op.create_index("ix_booking_reviews_id", "booking_reviews", ["id"])

    op.create_table(
        "bookings",
        *_audit_columns(),
        sa.Column("booking_status", sa.String(32), nullable=True),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("total_distance", sa.BigInteger(), nullable=False, server_default=sa.text("0")),
        sa.Column(
            "review_id",
            sa.Integer(),
            sa.ForeignKey("booking_reviews.id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("driver_id", sa.Integer(), sa.ForeignKey("drivers.id", ondelete="SET NULL"), nullable=True),
        sa.Column("passenger_id", sa.Integer(), sa.ForeignKey("passengers.id", ondelete="SET NULL"), nullable=True),
        sa.UniqueConstraint("review_id", name="uq_bookings_review_id"),
    )
    op.create_index("ix_bookings_id", "bookings", ["id"])
    op.create_index("ix_bookings_driver_id", "bookings", ["driver_id"])
    op.create_index("ix_bookings_passenger_id", "bookings", ["passenger_id"])

    op.create_table(
        "students",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("roll_no", sa.String(64), nullable=True),
    )
    op.create_index("ix_students_id", "students", ["id"])

    op.create_table(
        "courses",
        *_audit_columns(),
        sa.Column("name", sa.String(255), nullable=True),
    )
    op.create_index("ix_courses_id", "courses", ["id"])

    op.create_table(
        "course_student",
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("students.id", ondelete="CASCADE"), primary_key=True),
        sa.Column("course_id", sa.Integer(), sa.ForeignKey("courses.id", ondelete="CASCADE"), primary_key=True),
    )


def downgrade() -> None:
    op.drop_table("course_student")
    op.drop_table("courses")
    op.drop_table("students")
    op.drop_table("bookings")
    op.drop_table("booking_reviews")
    op.drop_table("passengers")
    op.drop_table("drivers")
