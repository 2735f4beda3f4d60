"""
github-activity MCP Server

Renders a GitHub user's recent push activity as an HTML list.
"""

import json
import logging
from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, Field, ConfigDict

from .config import load_config
from .github import GitHubClient
from .models import GITHUB_LOGIN_PATTERN
from .widget import ActivityWidget, WidgetOptions

# --- Server Init ---

mcp = FastMCP("github_activity_mcp")
_config = load_config()
_github = GitHubClient(_config.github_token, api_url=_config.api_url, timeout=_config.timeout)


# ============================================================
# ACTIVITY TOOLS
# ============================================================

class RenderInput(BaseModel):
    model_config = ConfigDict(extra="forbid")
    username: str = Field(..., description="GitHub username, e.g. 'octocat'", pattern=GITHUB_LOGIN_PATTERN)


@mcp.tool(
    name="activity_render",
    annotations={"readOnlyHint": True, "destructiveHint": False, "idempotentHint": False}
)
async def activity_render(params: RenderInput) -> str:
    """Render the five most recent push events of a GitHub user as HTML.

    Fetches the user's public event feed, keeps push events, and renders
    each with a relative timestamp, repo link, and per-commit links.

    Args:
        params: RenderInput with username

    Returns:
        str: JSON with username, rendered flag, and the HTML fragment (null when the feed was unavailable)
    """
    fragments: list[str] = []
    widget = ActivityWidget(WidgetOptions(username=params.username), client=_github, config=_config)
    html = await widget.render(fragments)
    return json.dumps({
        "username": params.username,
        "rendered": html is not None,
        "html": html,
    }, indent=2)


# ============================================================
# Entry point
# ============================================================

def main():
    logging.basicConfig(level=_config.log_level)
    mcp.run()


if __name__ == "__main__":
    main()
