"""Rule Sets — request-body rule tables, one per write endpoint.

Invariants:
    - Built once at import time, read-only afterwards
    - Field order is the order clients see errors in

Design Decisions:
    - is_required then min_length(1) for required text: the first rule
      reports a missing field, the second rejects non-text values
"""

from taskforge.core.validation import build_rule_set, rule
from taskforge.core.validators import is_email, is_required, min_length

PASSWORD_MIN_LENGTH = 8


def _required_text(field: str):
    label = field.capitalize()
    return [
        rule(is_required, f"{label} is required"),
        rule(min_length, f"{label} must be text", 1),
    ]


CUSTOM_FIELD_CREATE = build_rule_set({
    "name": _required_text("name"),
    "value": _required_text("value"),
})

CUSTOM_NAME_CREATE = build_rule_set({"name": _required_text("name")})

CUSTOM_PRIORITY_CREATE = build_rule_set({"level": _required_text("level")})

CUSTOM_RECURRING_CREATE = build_rule_set({"pattern": _required_text("pattern")})

CUSTOM_REMINDER_CREATE = build_rule_set({"time": _required_text("time")})

CUSTOM_ASSIGNEE_CREATE = build_rule_set({
    "user_id": [rule(is_required, "User is required")],
})

NOTIFICATION_CREATE = build_rule_set({"content": _required_text("content")})

PROJECT_CREATE = build_rule_set({"name": _required_text("name")})

PROJECT_MEMBER_ADD = build_rule_set({
    "user_id": [rule(is_required, "User is required")],
})

TASK_CREATE = build_rule_set({
    "title": _required_text("title"),
    "project_id": [rule(is_required, "Project is required")],
})

USER_CREATE = build_rule_set({
    "email": [
        rule(is_required, "Email is required"),
        rule(is_email, "Email is invalid"),
    ],
    "username": _required_text("username"),
    "password": [
        rule(is_required, "Password is required"),
        rule(
            min_length,
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters",
            PASSWORD_MIN_LENGTH,
        ),
    ],
})
