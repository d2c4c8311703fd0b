import datetime

from conftest import login, make_admitted_student, make_user


def test_list_hides_inactive_students(admin_client, db):
    active = make_admitted_student(db, datetime.date(2025, 6, 15), email="a@example.com")
    inactive = make_admitted_student(db, datetime.date(2025, 7, 1), email="b@example.com")
    inactive.is_active = False
    db.commit()

    ids = [s["id"] for s in admin_client.get("/api/students").json()["data"]]
    assert ids == [active.id]

    res = admin_client.get("/api/students", params={"include_inactive": True})
    assert {s["id"] for s in res.json()["data"]} == {active.id, inactive.id}


def test_get_student_includes_admission(admin_client, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15), "Class 5")

    res = admin_client.get(f"/api/students/{student.id}")

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["student_name"] == "Asha Verma"
    assert data["admission"]["class_enrolled"] == "Class 5"


def test_get_missing_student(admin_client):
    assert admin_client.get("/api/students/123").status_code == 404


def test_update_changes_only_sent_fields(admin_client, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))

    res = admin_client.put(
        f"/api/students/{student.id}",
        json={"phone": "9000000001", "father_name": "Raj Verma"},
    )

    assert res.status_code == 200
    data = res.json()["data"]
    assert data["phone"] == "9000000001"
    assert data["father_name"] == "Raj Verma"
    assert data["address"] == "12 Lake Road"


def test_toggle_status(admin_client, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))

    res = admin_client.patch(f"/api/students/{student.id}/status", json={"is_active": False})

    assert res.status_code == 200
    assert res.json()["data"]["is_active"] is False
    assert admin_client.get("/api/students").json()["data"] == []


def test_teacher_can_read_but_not_edit(client, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))
    make_user(db, "teacher@school.test", "TEACHER", password="teach123")
    login(client, "teacher@school.test", "teach123")

    assert client.get(f"/api/students/{student.id}").status_code == 200
    assert client.put(f"/api/students/{student.id}", json={"phone": "1"}).status_code == 403


def test_update_rejects_null_for_required_fields(admin_client, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))

    for field in ("student_name", "gender", "phone", "address", "is_active"):
        res = admin_client.put(f"/api/students/{student.id}", json={field: None})
        assert res.status_code == 422, field

    data = admin_client.get(f"/api/students/{student.id}").json()["data"]
    assert data["student_name"] == "Asha Verma"
    assert data["is_active"] is True


def test_update_can_clear_optional_fields(admin_client, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))
    admin_client.put(f"/api/students/{student.id}", json={"father_name": "Raj Verma"})

    res = admin_client.put(f"/api/students/{student.id}", json={"father_name": None})

    assert res.status_code == 200
    assert res.json()["data"]["father_name"] is None
