from types import SimpleNamespace

import pytest

from park.permissions import UserIsManager
from park.permissions.managers import bearer_token
from park.permissions.permission import RoutePermissionError


class FakeRequest(dict):

    def __init__(self, headers):
        super().__init__()
        self.headers = headers


def view_with_headers(**headers):
    return SimpleNamespace(request=FakeRequest(headers))


class TestRoutePermissionError:

    def test_str(self):
        error = RoutePermissionError("First reason.", "Second reason.")
        assert str(error) == "first reason, second reason"

    def test_serialize(self):
        error = RoutePermissionError("First reason.")
        assert error.serialize() == ["First reason."]


class TestBearerToken:

    def test_missing_header(self):
        with pytest.raises(RoutePermissionError):
            bearer_token(SimpleNamespace(headers={}))

    def test_malformed_header(self):
        with pytest.raises(RoutePermissionError):
            bearer_token(SimpleNamespace(headers={"Authorization": "Token abc"}))

    def test_token(self):
        assert bearer_token(SimpleNamespace(headers={"Authorization": "Bearer abc"})) == "abc"


class TestUserIsManager:

    async def test_unknown_token(self, database):
        """Assert that a token that doesn't belong to a manager is rejected."""
        with pytest.raises(RoutePermissionError) as error:
            await UserIsManager()(view_with_headers(Authorization="Bearer nobody"))
        assert any("manager rights" in message for message in error.value.messages)

    async def test_manager_token(self, random_manager):
        """Assert that a manager's token passes, and the manager is stored on the request."""
        view = view_with_headers(Authorization=f"Bearer {random_manager.id}")
        assert await UserIsManager()(view) is None
        assert view.request["manager"] == random_manager
