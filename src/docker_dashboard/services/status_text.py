"""
Human-readable container status, worded like ``docker ps``.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional


def human_duration(delta: timedelta) -> str:
    """Render a duration the way the Docker CLI does ("About a minute", "3 hours")."""
    seconds = int(delta.total_seconds())
    if seconds < 1:
        return "Less than a second"
    if seconds == 1:
        return "1 second"
    if seconds < 60:
        return f"{seconds} seconds"
    minutes = seconds // 60
    if minutes == 1:
        return "About a minute"
    if minutes < 60:
        return f"{minutes} minutes"
    hours = int(delta.total_seconds() / 3600 + 0.5)
    if hours == 1:
        return "About an hour"
    if hours < 48:
        return f"{hours} hours"
    if hours < 24 * 7 * 2:
        return f"{hours // 24} days"
    if hours < 24 * 30 * 2:
        return f"{hours // 24 // 7} weeks"
    if hours < 24 * 365 * 2:
        return f"{hours // 24 // 30} months"
    return f"{hours // 24 // 365} years"


def _since(moment: Optional[datetime], now: datetime) -> timedelta:
    if moment is None:
        return timedelta(0)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return now - moment


def describe_status(state: Any, now: Optional[datetime] = None) -> str:
    """
    Build the status column for a container state.

    Args:
        state: Container state as returned by inspect (``status``, ``exit_code``,
            ``started_at``, ``finished_at`` and optionally ``health``).
        now: Reference time, defaults to the current UTC time.

    Returns:
        A string such as ``Up 5 minutes`` or ``Exited (0) 2 hours ago``.
    """
    now = now or datetime.now(timezone.utc)
    status = (getattr(state, "status", None) or "").lower()
    exit_code = getattr(state, "exit_code", None) or 0

    if status in ("running", "paused"):
        uptime = human_duration(_since(getattr(state, "started_at", None), now))
        if status == "paused":
            return f"Up {uptime} (Paused)"
        health = getattr(state, "health", None)
        health_status = getattr(health, "status", None) if health is not None else None
        if health_status == "starting":
            return f"Up {uptime} (health: starting)"
        if health_status and health_status != "none":
            return f"Up {uptime} ({health_status})"
        return f"Up {uptime}"
    if status == "restarting":
        ago = human_duration(_since(getattr(state, "finished_at", None), now))
        return f"Restarting ({exit_code}) {ago} ago"
    if status == "removing":
        return "Removal In Progress"
    if status == "dead":
        return "Dead"
    if status == "created":
        return "Created"
    if status == "exited":
        ago = human_duration(_since(getattr(state, "finished_at", None), now))
        return f"Exited ({exit_code}) {ago} ago"
    return status.capitalize()
