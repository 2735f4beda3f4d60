import asyncio
import os, sys
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

import httpx
import pytest

from github_activity.exceptions import InvalidUsername, MalformedResponse
from github_activity.github import GitHubClient


def run_async(coro):
    return asyncio.run(coro)


def make_transport(status=200, body=None, content=None, seen=None):
    def handler(request):
        if seen is not None:
            seen.append(request)
        if content is not None:
            return httpx.Response(status, content=content)
        return httpx.Response(status, json=body if body is not None else [])
    return httpx.MockTransport(handler)


def test_requests_user_events_unauthenticated():
    seen = []
    client = GitHubClient(transport=make_transport(seen=seen))
    feed = run_async(client.get_user_events("octocat"))
    assert feed.meta.status == 200
    assert feed.data == []
    assert str(seen[0].url) == "https://api.github.com/users/octocat/events"
    assert "authorization" not in seen[0].headers
    assert seen[0].headers["accept"] == "application/vnd.github+json"


def test_token_sent_as_bearer():
    seen = []
    client = GitHubClient("tok", transport=make_transport(seen=seen))
    run_async(client.get_user_events("octocat"))
    assert seen[0].headers["authorization"] == "Bearer tok"


def test_custom_api_url():
    seen = []
    client = GitHubClient(api_url="http://ghe.local/api/v3/", transport=make_transport(seen=seen))
    run_async(client.get_user_events("octocat"))
    assert str(seen[0].url) == "http://ghe.local/api/v3/users/octocat/events"


def test_non_200_status_carried():
    client = GitHubClient(transport=make_transport(status=404, body={"message": "Not Found"}))
    feed = run_async(client.get_user_events("ghost"))
    assert feed.meta.status == 404
    assert feed.data == []


def test_invalid_json_raises_malformed():
    client = GitHubClient(transport=make_transport(content=b"<html>oops</html>"))
    with pytest.raises(MalformedResponse):
        run_async(client.get_user_events("octocat"))


@pytest.mark.parametrize("username", ["../repos/o/r", "octo?x=1", "octo#", "octo/events", "-octo", "octo\n", ""])
def test_non_login_username_rejected_before_request(username):
    seen = []
    client = GitHubClient(transport=make_transport(seen=seen))
    with pytest.raises(InvalidUsername):
        run_async(client.get_user_events(username))
    assert seen == []


def test_hyphenated_login_accepted():
    seen = []
    client = GitHubClient(transport=make_transport(seen=seen))
    run_async(client.get_user_events("octo-cat-42"))
    assert str(seen[0].url) == "https://api.github.com/users/octo-cat-42/events"
