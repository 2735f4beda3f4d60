"""Activity widget - fetch a user's event feed and render recent pushes."""

import logging
from typing import List, Optional, Protocol

from pydantic import BaseModel, ConfigDict, Field

from .config import Config, load_config
from .github import GitHubClient
from .models import GITHUB_LOGIN_PATTERN, EventFeedResponse, PushEvent
from .render import ActivityRenderer

_logger = logging.getLogger(__name__)


class Container(Protocol):
    def append(self, fragment: str) -> None: ...


class WidgetOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")
    username: str = Field(
        ..., pattern=GITHUB_LOGIN_PATTERN, description="GitHub username whose public events are shown"
    )


def select_push_events(feed: EventFeedResponse, limit: int = 5) -> List[PushEvent]:
    """First `limit` push events in feed order (newest first)."""
    pushes = [e for e in feed.data if e.is_push][:max(limit, 0)]
    return [PushEvent.from_event(e) for e in pushes]


class ActivityWidget:
    def __init__(
        self,
        options: WidgetOptions,
        client: Optional[GitHubClient] = None,
        config: Optional[Config] = None,
        renderer: Optional[ActivityRenderer] = None,
    ):
        self.options = options
        self.config = config or load_config()
        self.client = client or GitHubClient(
            self.config.github_token,
            api_url=self.config.api_url,
            timeout=self.config.timeout,
        )
        self.renderer = renderer or ActivityRenderer(
            show_avatars=self.config.show_avatars,
            reverse_commits=self.config.reverse_commits,
            avatar_size=self.config.avatar_size,
            gravatar_base=self.config.gravatar_url,
        )

    async def render(self, container: Container) -> Optional[str]:
        """
        Fetch the feed and append the rendered list to `container`.

        Returns the appended fragment, or None when the feed status was not
        200 (nothing is appended in that case).
        """
        username = self.options.username
        feed = await self.client.get_user_events(username)
        if feed.meta.status != 200:
            _logger.info("Skipping activity for %s: feed status %d", username, feed.meta.status)
            return None

        events = select_push_events(feed, self.config.event_limit)
        fragment = self.renderer.render(events)
        container.append(fragment)
        _logger.debug("Rendered %d push events for %s", len(events), username)
        return fragment


async def render(
    container: Container,
    options: WidgetOptions,
    client: Optional[GitHubClient] = None,
    config: Optional[Config] = None,
) -> Optional[str]:
    """Build a widget for `options` and render it into `container`."""
    return await ActivityWidget(options, client=client, config=config).render(container)
