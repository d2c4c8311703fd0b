import pytest

from permissions import can_call_api, has_access, menu_for_role


@pytest.mark.parametrize("role, path, expected", [
    ("SUPER_ADMIN", "/anything/at/all", True),
    ("ADMIN", "/students/12", True),
    ("ADMIN", "/fees", False),
    ("TEACHER", "/attendance", True),
    ("TEACHER", "/fees", False),
    ("ACCOUNTANT", "/fees/collect", True),
    ("ACCOUNTANT", "/exams", False),
    ("UNKNOWN", "/dashboard", False),
])
def test_has_access(role, path, expected):
    assert has_access(role, path) is expected


def test_menu_for_accountant():
    labels = [item["label"] for item in menu_for_role("ACCOUNTANT")]
    assert labels == ["Dashboard", "Students", "Fee Management", "Expenses"]


def test_menu_for_teacher():
    labels = [item["label"] for item in menu_for_role("TEACHER")]
    assert labels == ["Dashboard", "Students"]


def test_menu_for_super_admin_has_everything():
    labels = [item["label"] for item in menu_for_role("SUPER_ADMIN")]
    assert labels[-1] == "Settings"
    assert len(labels) == 8


def test_menu_for_unknown_role_is_empty():
    assert menu_for_role("GUEST") == []


@pytest.mark.parametrize("role, method, path, expected", [
    ("ADMIN", "POST", "/api/admissions", True),
    ("ACCOUNTANT", "POST", "/api/admissions", False),
    ("ACCOUNTANT", "PUT", "/api/monthly-fees/4", True),
    ("TEACHER", "GET", "/api/monthly-fees", False),
    ("TEACHER", "GET", "/api/students/3", True),
    ("TEACHER", "PUT", "/api/students/3", False),
    ("ADMIN", "GET", "/api/settings", True),
    ("ADMIN", "POST", "/api/settings", False),
    ("ADMIN", "GET", "/api/expenses", False),
    ("ACCOUNTANT", "GET", "/api/expenses/summary", True),
    ("ADMIN", "GET", "/api/unlisted", False),
    ("SUPER_ADMIN", "GET", "/api/unlisted", True),
    ("GUEST", "GET", "/api/students", False),
])
def test_can_call_api(role, method, path, expected):
    assert can_call_api(role, method, path) is expected


def test_prefix_match_does_not_leak_to_similar_paths():
    # "/api/settings-export" is not under "/api/settings"
    assert can_call_api("ADMIN", "GET", "/api/settings-export") is False
