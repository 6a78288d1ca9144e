from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from student_records.models.student import StudentProfile
from student_records.models.user import Role, User
from student_records.schemas.students import StudentUpsertIn, UpsertResult

EMAIL_ALREADY_EXISTS = "Email already exists"

_PROFILE_FIELDS = (
    "gender",
    "phone",
    "dob",
    "roll",
    "admission_date",
    "current_address",
    "permanent_address",
    "father_name",
    "father_phone",
    "mother_name",
    "mother_phone",
    "guardian_name",
    "guardian_phone",
    "relation_of_guardian",
)


def _apply_profile(profile: StudentProfile, data: StudentUpsertIn) -> None:
    for field in _PROFILE_FIELDS:
        setattr(profile, field, getattr(data, field))
    profile.class_name = data.class_name
    profile.section_name = data.section


def _email_owner(db: Session, email: str) -> int | None:
    return db.execute(select(User.id).where(User.email == email)).scalar_one_or_none()


def add_or_update_student(db: Session, payload: Mapping[str, Any]) -> UpsertResult:
    """Creates a student (no userId) or updates an existing one.

    Failures are reported through the result instead of raised, so the caller
    decides the HTTP status. The whole upsert is one transaction.
    """
    try:
        data = StudentUpsertIn.model_validate(dict(payload))
    except ValidationError as e:
        return UpsertResult(
            status=False, message="Invalid student data", description=str(e)
        )

    taken = _email_owner(db, data.email)
    if taken is not None and taken != data.user_id:
        return UpsertResult(status=False, message=EMAIL_ALREADY_EXISTS)

    try:
        if data.user_id is None:
            user = User(name=data.name, email=data.email, role=Role.STUDENT)
            db.add(user)
            db.flush()
            profile = StudentProfile(user_id=user.id)
            db.add(profile)
            message = "Student added successfully"
        else:
            user = db.get(User, data.user_id)
            if not user or user.role != Role.STUDENT:
                return UpsertResult(status=False, message="Student not found")
            user.name = data.name
            if user.email != data.email:
                user.email = data.email
                user.is_email_verified = False
            profile = user.student_profile
            if profile is None:
                profile = StudentProfile(user_id=user.id)
                db.add(profile)
            message = "Student updated successfully"

        _apply_profile(profile, data)
        db.commit()
    except IntegrityError as e:
        # unique index on users.email: a concurrent insert won the race
        db.rollback()
        return UpsertResult(
            status=False, message=EMAIL_ALREADY_EXISTS, description=str(e.orig)
        )
    except SQLAlchemyError as e:
        db.rollback()
        return UpsertResult(
            status=False, message="Unable to save student", description=str(e)
        )

    return UpsertResult(status=True, message=message, user_id=user.id)
