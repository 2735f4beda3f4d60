"""Schema for the GitHub user events feed, plus the decode step."""

from datetime import datetime
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError

from .exceptions import MalformedResponse

PUSH_EVENT = "PushEvent"

# GitHub logins: alphanumerics and hyphens, no leading hyphen, at most 39 chars
GITHUB_LOGIN_PATTERN = r"^[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})$"


class Meta(BaseModel):
    status: int


class Repo(BaseModel):
    name: str


class Event(BaseModel):
    type: str
    created_at: datetime
    repo: Repo
    # only interpreted for push events, see PushEvent.from_event
    payload: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_push(self) -> bool:
        return self.type == PUSH_EVENT


class EventFeedResponse(BaseModel):
    meta: Meta
    data: List[Event] = Field(default_factory=list)


class CommitAuthor(BaseModel):
    email: str


class Commit(BaseModel):
    sha: str
    message: str
    author: CommitAuthor


class PushPayload(BaseModel):
    size: int
    commits: List[Commit]


class PushEvent(BaseModel):
    created_at: datetime
    repo: Repo
    payload: PushPayload

    @classmethod
    def from_event(cls, event: Event) -> "PushEvent":
        """Validate the payload of a single push event."""
        try:
            payload = PushPayload.model_validate(event.payload)
        except ValidationError as e:
            raise MalformedResponse(
                f"Malformed PushEvent payload for {event.repo.name}: {e.error_count()} error(s)",
                errors=e.errors(),
            ) from e
        return cls(created_at=event.created_at, repo=event.repo, payload=payload)


def decode_feed(body: Any, status: int) -> EventFeedResponse:
    """
    Turn a raw events response into an EventFeedResponse.

    Non-200 responses decode to an empty feed carrying the status. A body that
    is already a {meta, data} envelope is validated as is; a bare JSON array is
    wrapped with the HTTP status.
    """
    if status != 200:
        return EventFeedResponse(meta=Meta(status=status))

    if isinstance(body, dict) and "meta" in body and "data" in body:
        raw = body
    else:
        raw = {"meta": {"status": status}, "data": body}

    try:
        return EventFeedResponse.model_validate(raw)
    except ValidationError as e:
        raise MalformedResponse(
            f"Malformed event feed: {e.error_count()} error(s)",
            errors=e.errors(),
        ) from e
