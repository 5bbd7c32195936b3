"""Custom template filters for the application."""

from datetime import UTC, datetime

from flask import Flask


def time_ago(dt: datetime | None) -> str:
    """Return a string representing time since the given datetime.

    Args:
        dt: The datetime to calculate time since

    Returns:
        str: A string like "3 days ago" or "5 hours ago"
    """
    if not dt:
        return "Never"

    now = datetime.now(UTC)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)

    diff = now - dt
    periods = (
        (diff.days // 365, "year", "years"),
        (diff.days // 30, "month", "months"),
        (diff.days // 7, "week", "weeks"),
        (diff.days, "day", "days"),
        (diff.seconds // 3600, "hour", "hours"),
        (diff.seconds // 60, "minute", "minutes"),
        (diff.seconds, "second", "seconds"),
    )

    for period, singular, plural in periods:
        if period > 0:
            return f"{period} {singular if period == 1 else plural} ago"
    return "just now"


def truncate_words(value: str | None, count: int = 12) -> str:
    """Shorten text to at most ``count`` words for table cells."""
    if not value:
        return ""
    words = value.split()
    if len(words) <= count:
        return value
    return " ".join(words[:count]) + "..."


def init_app(app: Flask) -> None:
    """Register template filters with the Flask application."""
    app.template_filter("time_ago")(time_ago)
    app.template_filter("truncate_words")(truncate_words)
