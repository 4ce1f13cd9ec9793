# eportal/core/constants.py

# ==========================================================
# USER TYPES (the `user_type` column, also the default role name)
# ==========================================================
USER_TYPES = ("student", "lecturer", "admin", "hod", "dean", "registrar", "bursar")

ADMIN_ROLE = "admin"

# Role dashboards the UI redirects to after sign-in
ROLE_DASHBOARDS = {
    "admin": "/admin",
    "dean": "/dean",
    "hod": "/hod",
    "lecturer": "/lecturer",
    "registrar": "/registrar",
    "bursar": "/bursar",
    "student": "/student",
}

# ==========================================================
# PERMISSION CATALOGUE
# ==========================================================
CRUD_ACTIONS = ("view", "create", "update", "delete")

RESOURCES = (
    "users",
    "roles",
    "permissions",
    "faculties",
    "departments",
    "programmes",
    "courses",
    "course_allocations",
    "course_registrations",
    "results",
    "academic_sessions",
    "fee_structures",
    "payments",
    "attendance",
    "hostels",
    "hostel_rooms",
    "hostel_allocations",
    "announcements",
    "notifications",
    "clearances",
    "documents",
    "examinations",
    "exam_cards",
    "transcripts",
    "certificates",
    "petitions",
    "senate_decisions",
    "scholarships",
    "scholarship_applications",
    "alumni",
    "audit_logs",
    "system_settings",
)

# Resources whose rows belong to one user; roles may hold "<action>_own" grants on them.
# Value is the owner column.
OWNED_RESOURCES = {
    "results": "student_id",
    "payments": "student_id",
    "course_registrations": "student_id",
    "attendance": "student_id",
    "hostel_allocations": "student_id",
    "clearances": "student_id",
    "exam_cards": "student_id",
    "transcripts": "student_id",
    "certificates": "student_id",
    "petitions": "student_id",
    "scholarship_applications": "student_id",
    "notifications": "user_id",
    "documents": "user_id",
    "alumni": "user_id",
}

EXTRA_PERMISSIONS = (
    ("view", "dashboard", "View dashboard"),
    ("upload", "results", "Upload results"),
    ("approve", "results", "Approve results"),
)


def own_action(action: str) -> str:
    return f"{action}_own"


def build_permission_catalogue() -> list[dict]:
    """Every (action, resource) pair the server checks, with a description."""
    catalogue = []
    for resource in RESOURCES:
        label = resource.replace("_", " ")
        for action in CRUD_ACTIONS:
            catalogue.append({
                "action": action,
                "resource": resource,
                "description": f"{action.capitalize()} {label}",
            })
        if resource in OWNED_RESOURCES:
            for action in CRUD_ACTIONS:
                catalogue.append({
                    "action": own_action(action),
                    "resource": resource,
                    "description": f"{action.capitalize()} own {label}",
                })
    for action, resource, description in EXTRA_PERMISSIONS:
        catalogue.append({"action": action, "resource": resource, "description": description})
    return catalogue


# ==========================================================
# DEFAULT ROLES ("action:resource" strings, "*" = everything)
# ==========================================================
_LECTURER = [
    "view:dashboard",
    "view:users",
    "view:courses",
    "view:course_allocations",
    "view:course_registrations",
    "view:academic_sessions",
    "view:results",
    "upload:results",
    "update:results",
    "view:attendance",
    "create:attendance",
    "update:attendance",
    "view:examinations",
    "view:announcements",
    "view_own:notifications",
    "update_own:notifications",
]

_HOD = _LECTURER + [
    "update:users",
    "view:departments",
    "view:programmes",
    "create:courses",
    "update:courses",
    "create:course_allocations",
    "update:course_allocations",
    "delete:course_allocations",
    "update:course_registrations",
    "approve:results",
    "create:announcements",
    "update:announcements",
    "view:petitions",
    "update:petitions",
]

_DEAN = _HOD + [
    "view:faculties",
    "delete:announcements",
    "view:senate_decisions",
    "create:senate_decisions",
    "update:senate_decisions",
    "create:examinations",
    "update:examinations",
]

DEFAULT_ROLES = [
    {
        "name": "admin",
        "description": "Full system access",
        "is_system_role": True,
        "permissions": ["*"],
    },
    {
        "name": "hod",
        "description": "Head of Department",
        "is_system_role": True,
        "permissions": _HOD,
    },
    {
        "name": "dean",
        "description": "Dean of Faculty",
        "is_system_role": True,
        "permissions": _DEAN,
    },
    {
        "name": "lecturer",
        "description": "Teaching staff",
        "is_system_role": True,
        "permissions": _LECTURER,
    },
    {
        "name": "registrar",
        "description": "Academic records office",
        "is_system_role": True,
        "permissions": [
            "view:dashboard",
            "view:users",
            "create:users",
            "update:users",
            "view:faculties",
            "view:departments",
            "view:programmes",
            "view:courses",
            "view:academic_sessions",
            "create:academic_sessions",
            "update:academic_sessions",
            "view:results",
            "view:course_registrations",
            "view:clearances",
            "update:clearances",
            "view:documents",
            "update:documents",
            "view:transcripts",
            "create:transcripts",
            "update:transcripts",
            "view:certificates",
            "create:certificates",
            "update:certificates",
            "view:exam_cards",
            "create:exam_cards",
            "update:exam_cards",
            "view:alumni",
            "create:alumni",
            "update:alumni",
            "view:senate_decisions",
            "view:petitions",
            "update:petitions",
            "view:system_settings",
            "update:system_settings",
            "view:announcements",
            "view_own:notifications",
            "update_own:notifications",
        ],
    },
    {
        "name": "bursar",
        "description": "Finance office",
        "is_system_role": True,
        "permissions": [
            "view:dashboard",
            "view:users",
            "view:academic_sessions",
            "view:programmes",
            "view:payments",
            "create:payments",
            "update:payments",
            "view:fee_structures",
            "create:fee_structures",
            "update:fee_structures",
            "view:clearances",
            "update:clearances",
            "view:scholarships",
            "view:scholarship_applications",
            "update:scholarship_applications",
            "view:announcements",
            "view_own:notifications",
            "update_own:notifications",
        ],
    },
    {
        "name": "student",
        "description": "Enrolled student",
        "is_system_role": True,
        "permissions": [
            "view:dashboard",
            "view:faculties",
            "view:departments",
            "view:programmes",
            "view:courses",
            "view:academic_sessions",
            "view:fee_structures",
            "view:announcements",
            "view:examinations",
            "view:hostels",
            "view:hostel_rooms",
            "view:scholarships",
            "view_own:results",
            "view_own:payments",
            "create_own:payments",
            "view_own:course_registrations",
            "create_own:course_registrations",
            "view_own:attendance",
            "view_own:hostel_allocations",
            "view_own:clearances",
            "view_own:exam_cards",
            "view_own:transcripts",
            "create_own:transcripts",
            "view_own:certificates",
            "view_own:petitions",
            "create_own:petitions",
            "view_own:scholarship_applications",
            "create_own:scholarship_applications",
            "view_own:notifications",
            "update_own:notifications",
            "view_own:documents",
            "create_own:documents",
        ],
    },
]
