from student_records.models.student import StudentProfile
from student_records.models.user import Role, User
from student_records.services.student_payload import normalize_student_payload
from student_records.services import student_repository
from student_records.services.student_repository import add_or_update_student


def test_insert_creates_user_and_profile(db_session, student_body):
    result = add_or_update_student(db_session, normalize_student_payload(student_body))

    assert result.status is True
    assert result.message == "Student added successfully"
    user = db_session.get(User, result.user_id)
    assert user.role == Role.STUDENT
    assert user.email == "carlos@example.com"
    profile = db_session.get(StudentProfile, result.user_id)
    assert profile.class_name == "Grade 6"
    assert profile.section_name == "B"
    assert profile.roll == 12
    assert profile.relation_of_guardian == "Father"


def test_insert_accepts_optional_dates(db_session, student_body):
    student_body.update({"dob": "2013-02-20", "admissionDate": "2024-01-15"})

    result = add_or_update_student(db_session, normalize_student_payload(student_body))

    profile = db_session.get(StudentProfile, result.user_id)
    assert profile.dob.isoformat() == "2013-02-20"
    assert profile.admission_date.isoformat() == "2024-01-15"


def test_duplicate_email_is_reported(db_session, test_student):
    result = add_or_update_student(
        db_session,
        normalize_student_payload({"name": "Other", "email": test_student.email}),
    )

    assert result.status is False
    assert result.message == "Email already exists"
    assert result.user_id is None


def test_update_keeps_own_email(db_session, test_student):
    result = add_or_update_student(
        db_session,
        normalize_student_payload(
            {"userId": test_student.id, "name": "Maria Silva", "email": test_student.email, "roll": 9}
        ),
    )

    assert result.status is True
    assert result.message == "Student updated successfully"
    assert result.user_id == test_student.id
    db_session.expire_all()
    assert db_session.get(StudentProfile, test_student.id).roll == 9


def test_update_with_new_email_resets_verification(db_session, test_student):
    test_student.is_email_verified = True
    db_session.commit()

    result = add_or_update_student(
        db_session,
        normalize_student_payload(
            {"userId": test_student.id, "name": "Maria Silva", "email": "maria.new@example.com"}
        ),
    )

    assert result.status is True
    db_session.expire_all()
    user = db_session.get(User, test_student.id)
    assert user.email == "maria.new@example.com"
    assert user.is_email_verified is False


def test_update_unknown_student(db_session):
    result = add_or_update_student(
        db_session,
        normalize_student_payload({"userId": 4242, "name": "Ghost", "email": "ghost@example.com"}),
    )

    assert result.status is False
    assert result.message == "Student not found"


def test_update_refuses_non_student_users(db_session, admin_user):
    result = add_or_update_student(
        db_session,
        normalize_student_payload({"userId": admin_user.id, "name": "Admin", "email": admin_user.email}),
    )

    assert result.status is False
    assert result.message == "Student not found"


def test_invalid_payload_is_reported_not_raised(db_session):
    result = add_or_update_student(
        db_session, normalize_student_payload({"name": "No Email", "email": "not-an-email"})
    )

    assert result.status is False
    assert result.message == "Invalid student data"
    assert "email" in result.description


def test_concurrent_duplicate_email_is_reported(db_session, test_student, monkeypatch):
    # another request inserted the same e-mail after this one checked it
    monkeypatch.setattr(student_repository, "_email_owner", lambda db, email: None)

    result = add_or_update_student(
        db_session,
        normalize_student_payload({"name": "Late Twin", "email": test_student.email}),
    )

    assert result.status is False
    assert result.message == "Email already exists"
    assert result.user_id is None
    db_session.expire_all()
    same_email = db_session.query(User).filter(User.email == test_student.email).all()
    assert [u.id for u in same_email] == [test_student.id]
