"""HTML rendering for push events."""

import hashlib
from datetime import datetime, timezone
from html import escape as html_escape
from typing import List, Optional

from .config import DEFAULT_AVATAR_SIZE, DEFAULT_GRAVATAR_URL
from .models import Commit, PushEvent

GITHUB_WEB = "https://github.com"
SHORT_SHA_LENGTH = 7
# average Gregorian month and year
DAYS_PER_MONTH = 146097 / 4800
DAYS_PER_YEAR = 146097 / 400


def _round(x: float) -> int:
    # half-up, so 1.5 minutes reads as "2 minutes"
    return int(x + 0.5)


def format_relative_time(moment: datetime, now: Optional[datetime] = None) -> str:
    """
    Format a datetime as a humanized "... ago" string.

    Each unit is rounded before it is compared against its threshold, so
    44m50s reads "an hour ago" rather than "45 minutes ago".
    """
    now = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    elapsed = max((now - moment).total_seconds(), 0.0)
    seconds = _round(elapsed)
    minutes = _round(elapsed / 60)
    hours = _round(elapsed / 3600)
    days = _round(elapsed / 86400)
    months = _round(elapsed / 86400 / DAYS_PER_MONTH)
    years = _round(elapsed / 86400 / DAYS_PER_YEAR)

    if seconds < 45:
        return "a few seconds ago"
    if minutes <= 1:
        return "a minute ago"
    if minutes < 45:
        return f"{minutes} minutes ago"
    if hours <= 1:
        return "an hour ago"
    if hours < 22:
        return f"{hours} hours ago"
    if days <= 1:
        return "a day ago"
    if days < 26:
        return f"{days} days ago"
    if months <= 1:
        return "a month ago"
    if months < 11:
        return f"{months} months ago"
    if years <= 1:
        return "a year ago"
    return f"{years} years ago"


def gravatar_url(email: str, size: int = DEFAULT_AVATAR_SIZE, base: str = DEFAULT_GRAVATAR_URL) -> str:
    digest = hashlib.md5(email.lower().encode("utf-8")).hexdigest()
    return f"{base}{digest}?s={size}"


def short_sha(sha: str) -> str:
    return sha[:SHORT_SHA_LENGTH]


def repo_url(repo_name: str) -> str:
    return f"{GITHUB_WEB}/{repo_name}"


class ActivityRenderer:
    """
    Render push events as a nested HTML list.

    `reverse_commits` flips the API order of commits within each push.
    `show_avatars` adds a gravatar image in front of each commit.
    """

    def __init__(
        self,
        show_avatars: bool = True,
        reverse_commits: bool = True,
        avatar_size: int = DEFAULT_AVATAR_SIZE,
        gravatar_base: str = DEFAULT_GRAVATAR_URL,
        now: Optional[datetime] = None,
    ):
        self.show_avatars = show_avatars
        self.reverse_commits = reverse_commits
        self.avatar_size = avatar_size
        self.gravatar_base = gravatar_base
        self.now = now

    def render_commit(self, commit: Commit, url: str) -> str:
        parts = []
        if self.show_avatars:
            avatar = gravatar_url(commit.author.email, self.avatar_size, self.gravatar_base)
            parts.append(f'<img src="{html_escape(avatar)}">')
        href = f"{url}/commit/{commit.sha}"
        parts.append(f'<a href="{html_escape(href)}">{html_escape(short_sha(commit.sha))}</a>')
        parts.append(" ")
        parts.append(html_escape(commit.message))
        return f"<li>{''.join(parts)}</li>"

    def render_event(self, event: PushEvent) -> str:
        url = repo_url(event.repo.name)
        commits = [self.render_commit(c, url) for c in event.payload.commits]
        if self.reverse_commits:
            commits.reverse()

        size = event.payload.size
        noun = "commits" if size > 1 else "commit"
        timestamp = (
            f'<time datetime="{html_escape(event.created_at.isoformat())}">'
            f"{format_relative_time(event.created_at, self.now)}</time>"
        )
        repo_link = f'<a href="{html_escape(url)}">{html_escape(event.repo.name)}</a>'
        return (
            f"<li>{timestamp} pushed {size} {noun} to {repo_link}"
            f'<ul class="commit-list">{"".join(commits)}</ul></li>'
        )

    def render(self, events: List[PushEvent]) -> str:
        return f"<ul>{''.join(self.render_event(e) for e in events)}</ul>"
