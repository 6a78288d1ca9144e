# student_records/api/routes/students.py
from typing import Annotated, Any, NoReturn

from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session

from student_records.core.logging import get_logger
from student_records.db import get_db
from student_records.deps import get_current_user
from student_records.errors import ApiError
from student_records.models.user import User
from student_records.schemas.students import (
    MessageOut,
    StudentAddOut,
    StudentDetailOut,
    StudentFilter,
    StudentListOut,
    StudentStatusIn,
    UpsertResult,
)
from student_records.services.account_verification import (
    send_account_verification_email,
)
from student_records.services.student_payload import (
    normalize_student_payload,
    parse_roll,
)
from student_records.services.student_repository import (
    EMAIL_ALREADY_EXISTS,
    add_or_update_student,
)
from student_records.services.students import (
    get_all_students,
    get_student_detail,
    set_student_status,
)

router = APIRouter(prefix="/students", tags=["students"])

ADD_STUDENT_AND_EMAIL_SEND_SUCCESS = (
    "Student added and verification email sent successfully."
)
ADD_STUDENT_BUT_EMAIL_SEND_FAIL = "Student added, but failed to send verification email."


def _raise_upsert_failure(event: str, result: UpsertResult, context: dict) -> NoReturn:
    # context is a whitelist: never log the raw body
    get_logger().error(
        event,
        message=result.message,
        description=result.description,
        context=context,
    )
    status_code = 409 if result.message == EMAIL_ALREADY_EXISTS else 500
    raise ApiError(status_code, result.message)


@router.get("", response_model=StudentListOut)
def list_students(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Session = Depends(get_db),
    name: str | None = Query(None),
    class_name: str | None = Query(None, alias="class"),
    section: str | None = Query(None),
    roll: str | None = Query(None, description="Ignored unless it is a finite number"),
):
    filters = StudentFilter(
        name=name,
        class_name=class_name,
        section=section,
        roll=parse_roll(roll),
    )
    students = get_all_students(db, filters)
    return StudentListOut(students=students)


@router.post("", response_model=StudentAddOut)
def add_student(
    current_user: Annotated[User, Depends(get_current_user)],
    body: dict[str, Any] | None = Body(None),
    db: Session = Depends(get_db),
):
    payload = normalize_student_payload(body)
    result = add_or_update_student(db, payload)
    if not result.status:
        _raise_upsert_failure(
            "student.add_failed",
            result,
            {
                "email": payload.get("email"),
                "class": payload.get("class"),
                "section": payload.get("section"),
                "roll": payload.get("roll"),
            },
        )

    try:
        send_account_verification_email(
            user_id=result.user_id, user_email=payload["email"]
        )
    except Exception as exc:
        # the student is saved; a mail failure only changes the message
        get_logger().warning(
            "student.verification_email_failed",
            user_id=result.user_id,
            error=str(exc),
        )
        return StudentAddOut(message=ADD_STUDENT_BUT_EMAIL_SEND_FAIL, id=result.user_id)

    return StudentAddOut(message=ADD_STUDENT_AND_EMAIL_SEND_SUCCESS, id=result.user_id)


@router.put("/{student_id}", response_model=MessageOut)
def update_student(
    student_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    body: dict[str, Any] | None = Body(None),
    db: Session = Depends(get_db),
):
    payload = normalize_student_payload({**(body or {}), "userId": student_id})
    result = add_or_update_student(db, payload)
    if not result.status:
        _raise_upsert_failure(
            "student.update_failed",
            result,
            {
                "userId": student_id,
                "email": payload.get("email"),
                "class": payload.get("class"),
                "section": payload.get("section"),
                "roll": payload.get("roll"),
            },
        )

    return MessageOut(message=result.message)


@router.get("/{student_id}", response_model=StudentDetailOut)
def get_student(
    student_id: int,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Session = Depends(get_db),
):
    return get_student_detail(db, student_id)


@router.api_route("/{student_id}/status", methods=["POST", "PATCH"])
def change_student_status(
    student_id: int,
    payload: StudentStatusIn,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Session = Depends(get_db),
):
    return set_student_status(
        db, user_id=student_id, reviewer_id=current_user.id, status=payload.status
    )
