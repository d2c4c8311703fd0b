import datetime

from models.fee_models import MonthlyFee

from conftest import make_admitted_student


def test_create_adhoc_fee(admin_client, school_settings, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))

    res = admin_client.post(
        "/api/fee-management",
        json={"student_id": student.id, "amount": 750, "due_date": "2025-08-10"},
    )

    assert res.status_code == 201, res.text
    data = res.json()["data"]
    assert (data["month"], data["year"]) == (8, 2025)
    assert data["tuition_fee"] == data["total_amount"] == 750.0
    assert data["status"] == "PENDING"


def test_adhoc_fee_resets_existing_month(admin_client, school_settings, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))
    first = admin_client.post(
        "/api/fee-management",
        json={"student_id": student.id, "amount": 750, "due_date": "2025-08-10"},
    ).json()["data"]
    admin_client.put(f"/api/monthly-fees/{first['id']}", json={"paid_amount": 750})

    res = admin_client.post(
        "/api/fee-management",
        json={"student_id": student.id, "amount": 820, "due_date": "2025-08-25"},
    )

    data = res.json()["data"]
    assert data["id"] == first["id"]
    assert (data["total_amount"], data["paid_amount"], data["status"]) == (820.0, 0.0, "PENDING")
    assert db.query(MonthlyFee).count() == 1


def test_adhoc_fee_invalid_due_date(admin_client, school_settings, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))

    res = admin_client.post(
        "/api/fee-management",
        json={"student_id": student.id, "amount": 100, "due_date": "next month"},
    )

    assert res.status_code == 400
    assert res.json()["detail"] == "Invalid due_date"


def test_adhoc_fee_unknown_student(admin_client):
    res = admin_client.post(
        "/api/fee-management",
        json={"student_id": 42, "amount": 100, "due_date": "2025-08-10"},
    )
    assert res.status_code == 404


def test_adhoc_fee_requires_positive_amount(admin_client, school_settings, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))
    res = admin_client.post(
        "/api/fee-management",
        json={"student_id": student.id, "amount": 0, "due_date": "2025-08-10"},
    )
    assert res.status_code == 422


def test_list_is_newest_due_date_first(admin_client, school_settings, db):
    student = make_admitted_student(db, datetime.date(2025, 6, 15))
    for due in ("2025-07-01", "2025-12-01", "2025-09-01"):
        admin_client.post(
            "/api/fee-management",
            json={"student_id": student.id, "amount": 300, "due_date": due},
        )

    rows = admin_client.get("/api/fee-management").json()["data"]

    assert [r["month"] for r in rows] == [12, 9, 7]
    assert rows[0]["student"]["student_name"] == "Asha Verma"
