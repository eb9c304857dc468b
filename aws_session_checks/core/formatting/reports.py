"""
Status line builders for the check commands.
Each returns a SummaryResult whose text is the single plugin output line.
"""

from aws_session_checks.core.models.check_models import Severity, SummaryResult

HEALTHY_TEXT = "OK: All Healthy"


def build_sessions_line(users):
    """Sessions summary; always OK, zero sessions included."""
    users = tuple(users)
    text = f"Sessions: {len(users)} - Users: {', '.join(users)}"
    return SummaryResult(count=len(users), users=users, severity=Severity.OK, text=text)


def build_health_line(unhealthy):
    """CRITICAL with every unhealthy name (status) pair in order, else OK."""
    unhealthy = tuple(unhealthy)
    if not unhealthy:
        return SummaryResult(count=0, users=(), severity=Severity.OK, text=HEALTHY_TEXT)

    entries = ", ".join(f"{item.name} ({item.status})" for item in unhealthy)
    return SummaryResult(
        count=len(unhealthy),
        users=tuple(item.name for item in unhealthy),
        severity=Severity.CRITICAL,
        text=f"CRITICAL: {entries}",
    )


def build_unknown_line(error):
    # Plugin output is one line; tool errors can carry several.
    message = " ".join(str(error).split()) or type(error).__name__
    return SummaryResult(count=0, users=(), severity=Severity.UNKNOWN, text=f"UNKNOWN: {message}")
