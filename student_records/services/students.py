from __future__ import annotations

from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from student_records.errors import ApiError
from student_records.models.student import StudentProfile
from student_records.models.user import Role, User
from student_records.schemas.students import (
    MessageOut,
    StudentDetailOut,
    StudentFilter,
    StudentListItem,
)


def get_all_students(db: Session, filters: StudentFilter) -> list[StudentListItem]:
    q = (
        select(User)
        .outerjoin(StudentProfile, StudentProfile.user_id == User.id)
        .where(User.role == Role.STUDENT)
    )
    if filters.name:
        q = q.where(func.lower(User.name).contains(filters.name.lower()))
    if filters.class_name:
        q = q.where(StudentProfile.class_name == filters.class_name)
    if filters.section:
        q = q.where(StudentProfile.section_name == filters.section)
    if filters.roll is not None:
        q = q.where(StudentProfile.roll == filters.roll)

    rows = db.execute(q.order_by(User.id)).scalars().all()
    return [
        StudentListItem(
            id=u.id,
            name=u.name,
            email=u.email,
            last_login=u.last_login,
            system_access=u.is_active,
        )
        for u in rows
    ]


def get_student_detail(db: Session, student_id: int | str) -> StudentDetailOut:
    try:
        student_id = int(student_id)
    except (TypeError, ValueError):
        raise ApiError(404, "Student not found") from None

    user = db.execute(
        select(User)
        .options(selectinload(User.student_profile))
        .where(User.id == student_id, User.role == Role.STUDENT)
    ).scalar_one_or_none()
    if not user:
        raise ApiError(404, "Student not found")

    p = user.student_profile
    return StudentDetailOut(
        id=user.id,
        name=user.name,
        email=user.email,
        system_access=user.is_active,
        email_verified=user.is_email_verified,
        phone=p.phone if p else None,
        gender=p.gender if p else None,
        dob=p.dob if p else None,
        class_name=p.class_name if p else None,
        section_name=p.section_name if p else None,
        roll=p.roll if p else None,
        admission_date=p.admission_date if p else None,
        current_address=p.current_address if p else None,
        permanent_address=p.permanent_address if p else None,
        father_name=p.father_name if p else None,
        father_phone=p.father_phone if p else None,
        mother_name=p.mother_name if p else None,
        mother_phone=p.mother_phone if p else None,
        guardian_name=p.guardian_name if p else None,
        guardian_phone=p.guardian_phone if p else None,
        relation_of_guardian=p.relation_of_guardian if p else None,
        status_last_reviewed_at=user.status_last_reviewed_at,
    )


def set_student_status(
    db: Session, *, user_id: int, reviewer_id: int | None, status: bool
) -> MessageOut:
    user = db.get(User, user_id)
    if not user or user.role != Role.STUDENT:
        raise ApiError(404, "Student not found")

    user.is_active = status
    user.status_last_reviewed_at = datetime.now(UTC)
    user.status_last_reviewer_id = reviewer_id
    db.commit()
    return MessageOut(message="Student status changed successfully")
