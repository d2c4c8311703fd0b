"""
Role based access: page prefixes, API prefixes and the sidebar menu.
"""
from typing import List

SUPER_ADMIN = "SUPER_ADMIN"
ADMIN = "ADMIN"
TEACHER = "TEACHER"
ACCOUNTANT = "ACCOUNTANT"

ROLES = (SUPER_ADMIN, ADMIN, TEACHER, ACCOUNTANT)

ROUTE_ACCESS = {
    SUPER_ADMIN: ["*"],
    ADMIN: ["/dashboard", "/students", "/teachers", "/classes", "/subjects", "/exams"],
    TEACHER: ["/dashboard", "/students", "/attendance", "/exams"],
    ACCOUNTANT: ["/dashboard", "/fees", "/students"],
}

NAV_ITEMS = [
    {"label": "Dashboard", "href": "/dashboard", "roles": ROLES},
    {"label": "Students", "href": "/dashboard/students", "roles": ROLES},
    {"label": "Admissions", "href": "/dashboard/admission", "roles": (SUPER_ADMIN, ADMIN)},
    {"label": "Teachers", "href": "/teachers", "roles": (SUPER_ADMIN, ADMIN)},
    {"label": "Subjects", "href": "/subjects", "roles": (SUPER_ADMIN, ADMIN)},
    {"label": "Fee Management", "href": "/dashboard/fee-management", "roles": (SUPER_ADMIN, ADMIN, ACCOUNTANT)},
    {"label": "Expenses", "href": "/dashboard/expenses", "roles": (SUPER_ADMIN, ACCOUNTANT)},
    {"label": "Settings", "href": "/dashboard/settings", "roles": (SUPER_ADMIN,)},
]

# API prefix -> (read roles, write roles). First matching prefix wins.
FEE_ROLES = (SUPER_ADMIN, ADMIN, ACCOUNTANT)
API_ACCESS = [
    ("/api/admissions", (SUPER_ADMIN, ADMIN), (SUPER_ADMIN, ADMIN)),
    ("/api/monthly-fees", FEE_ROLES, FEE_ROLES),
    ("/api/fee-management", FEE_ROLES, FEE_ROLES),
    ("/api/school-fees", ROLES, (SUPER_ADMIN,)),
    ("/api/expenses", (SUPER_ADMIN, ACCOUNTANT), (SUPER_ADMIN, ACCOUNTANT)),
    ("/api/settings", ROLES, (SUPER_ADMIN,)),
    ("/api/students", ROLES, (SUPER_ADMIN, ADMIN)),
    ("/api/dashboard", ROLES, ROLES),
    ("/api/auth", ROLES, ROLES),
]

READ_METHODS = ("GET", "HEAD", "OPTIONS")


def _matches(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def has_access(role: str, path: str) -> bool:
    allowed_routes = ROUTE_ACCESS.get(role)
    if not allowed_routes:
        return False
    if "*" in allowed_routes:
        return True
    return any(path.startswith(route) for route in allowed_routes)


def can_call_api(role: str, method: str, path: str) -> bool:
    if role not in ROLES:
        return False
    for prefix, read_roles, write_roles in API_ACCESS:
        if _matches(path, prefix):
            roles = read_roles if method.upper() in READ_METHODS else write_roles
            return role in roles
    # unlisted API paths are super admin only
    return role == SUPER_ADMIN


def menu_for_role(role: str) -> List[dict]:
    return [
        {"label": item["label"], "href": item["href"]}
        for item in NAV_ITEMS
        if role in item["roles"]
    ]
