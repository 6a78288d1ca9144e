from __future__ import annotations

import datetime as dt

from sqlalchemy import Date, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from student_records.db.base_class import Base


class StudentProfile(Base):
    __tablename__ = "student_profiles"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), primary_key=True
    )
    gender: Mapped[str | None] = mapped_column(String(10))
    phone: Mapped[str | None] = mapped_column(String(20))
    dob: Mapped[dt.date | None] = mapped_column(Date)
    class_name: Mapped[str | None] = mapped_column(String(50), index=True)
    section_name: Mapped[str | None] = mapped_column(String(50), index=True)
    roll: Mapped[int | None] = mapped_column(Integer)
    admission_date: Mapped[dt.date | None] = mapped_column(Date)

    current_address: Mapped[str | None] = mapped_column(String(50))
    permanent_address: Mapped[str | None] = mapped_column(String(50))

    father_name: Mapped[str | None] = mapped_column(String(50))
    father_phone: Mapped[str | None] = mapped_column(String(20))
    mother_name: Mapped[str | None] = mapped_column(String(50))
    mother_phone: Mapped[str | None] = mapped_column(String(20))
    guardian_name: Mapped[str | None] = mapped_column(String(50))
    guardian_phone: Mapped[str | None] = mapped_column(String(20))
    relation_of_guardian: Mapped[str | None] = mapped_column(String(30))

    user = relationship("User", back_populates="student_profile")

    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(tz=dt.UTC),
        nullable=False,
    )
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: dt.datetime.now(tz=dt.UTC),
        onupdate=lambda: dt.datetime.now(tz=dt.UTC),
        nullable=False,
    )
