from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, EmailStr, Field, constr
from pydantic.alias_generators import to_camel

_camel = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StudentFilter(BaseModel):
    model_config = _camel

    name: str | None = None
    class_name: str | None = None
    section: str | None = None
    roll: int | float | None = None


class StudentListItem(BaseModel):
    model_config = _camel

    id: int
    name: str
    email: str
    last_login: dt.datetime | None = None
    system_access: bool


class StudentListOut(BaseModel):
    students: list[StudentListItem]


class StudentDetailOut(BaseModel):
    model_config = _camel

    id: int
    name: str
    email: str
    system_access: bool
    email_verified: bool
    phone: str | None = None
    gender: str | None = None
    dob: dt.date | None = None
    class_name: str | None = Field(None, alias="class")
    section_name: str | None = Field(None, alias="section")
    roll: int | None = None
    admission_date: dt.date | None = None
    current_address: str | None = None
    permanent_address: str | None = None
    father_name: str | None = None
    father_phone: str | None = None
    mother_name: str | None = None
    mother_phone: str | None = None
    guardian_name: str | None = None
    guardian_phone: str | None = None
    relation_of_guardian: str | None = None
    status_last_reviewed_at: dt.datetime | None = None


class StudentUpsertIn(BaseModel):
    """Normalized student payload as accepted by the repository."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    user_id: int | None = None
    name: constr(min_length=1, max_length=100)
    email: EmailStr
    gender: constr(max_length=10) | None = None
    phone: constr(max_length=20) | None = None
    dob: dt.date | None = None
    class_name: constr(max_length=50) | None = Field(None, alias="class")
    section: constr(max_length=50) | None = None
    roll: int | None = None
    admission_date: dt.date | None = None
    current_address: constr(max_length=50) | None = None
    permanent_address: constr(max_length=50) | None = None
    father_name: constr(max_length=50) | None = None
    father_phone: constr(max_length=20) | None = None
    mother_name: constr(max_length=50) | None = None
    mother_phone: constr(max_length=20) | None = None
    guardian_name: constr(max_length=50) | None = None
    guardian_phone: constr(max_length=20) | None = None
    relation_of_guardian: constr(max_length=30) | None = None


class UpsertResult(BaseModel):
    status: bool
    message: str
    description: str | None = None
    user_id: int | None = None


class StudentAddOut(BaseModel):
    message: str
    id: int


class MessageOut(BaseModel):
    message: str


class StudentStatusIn(BaseModel):
    status: bool
