from . import attendance, auth, classes, events, health, members, payments, progress, reports, sessions, techniques

__all__ = [
    "attendance",
    "auth",
    "classes",
    "events",
    "health",
    "members",
    "payments",
    "progress",
    "reports",
    "sessions",
    "techniques",
]
