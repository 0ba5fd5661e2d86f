"""
Tests for bulk ACTIVE/PAUSED switching.
"""

import httpx
import pytest

from adsbot_kit.integrations.facebook.client import FacebookAdsClient
from adsbot_kit.integrations.facebook.exceptions import FacebookValidationError
from adsbot_kit.integrations.facebook.models import AdSetStatus
from adsbot_kit.integrations.facebook.testing import MockFacebookClient

from ..bulk import bulk_set_status, parse_adset_ids, parse_target_status


class TestParsing:
    """Tests for id and status parsing."""

    def test_ids_trimmed_and_blank_dropped(self):
        """Test whitespace and empty entries."""
        assert parse_adset_ids(" 123, ,456 ,") == ["123", "456"]

    def test_duplicates_kept(self):
        """Test repeated id is kept once per occurrence."""
        assert parse_adset_ids("1,1") == ["1", "1"]

    @pytest.mark.parametrize("raw", ["", "   ", ",,", None])
    def test_no_ids(self, raw):
        """Test nothing to toggle is a validation error."""
        with pytest.raises(FacebookValidationError) as exc_info:
            parse_adset_ids(raw)
        assert exc_info.value.field == "ids"

    def test_status(self):
        """Test both spellings of the two statuses."""
        assert parse_target_status("ACTIVE") is AdSetStatus.ACTIVE
        assert parse_target_status(" paused ") is AdSetStatus.PAUSED
        assert parse_target_status(AdSetStatus.PAUSED) is AdSetStatus.PAUSED

    def test_bad_status(self):
        """Test anything else is rejected."""
        with pytest.raises(FacebookValidationError) as exc_info:
            parse_target_status("ARCHIVED")
        assert exc_info.value.field == "action"


class TestBulkSetStatus:
    """Tests for bulk_set_status."""

    @pytest.mark.asyncio
    async def test_one_post_per_id_in_order(self):
        """Test blank entries are skipped and order is kept."""
        client = MockFacebookClient()
        result = await bulk_set_status(client, "123, ,456", "PAUSED")
        assert client.calls == [
            ("POST", "123", {"status": "PAUSED"}),
            ("POST", "456", {"status": "PAUSED"}),
        ]
        assert [o.id for o in result.outcomes] == ["123", "456"]
        assert result.all_ok
        assert all(o.action_label == "Paused" for o in result.outcomes)

    @pytest.mark.asyncio
    async def test_partial_failure(self):
        """Test a failed id does not stop the ones after it."""
        client = MockFacebookClient()
        client.fail_post("222", "Ad set does not exist")
        result = await bulk_set_status(client, "111,222,333", AdSetStatus.ACTIVE)
        assert len(client.calls) == 3
        assert [o.id for o in result.successes] == ["111", "333"]
        assert [o.id for o in result.failures] == ["222"]
        assert "Ad set does not exist" in result.failures[0].error_message
        assert not result.all_ok

    @pytest.mark.asyncio
    async def test_outcomes_partition(self):
        """Test successes and failures split the outcomes."""
        client = MockFacebookClient()
        client.fail_post("2", "nope")
        client.post_responses["3"] = {"result": "weird"}
        result = await bulk_set_status(client, "1,2,3,4", "ACTIVE")
        assert len(result.successes) + len(result.failures) == len(result.outcomes) == 4
        assert [o.id for o in result.failures] == ["2", "3"]

    @pytest.mark.asyncio
    async def test_duplicates_sent_twice(self):
        """Test repeated id gets a request per occurrence."""
        client = MockFacebookClient()
        result = await bulk_set_status(client, "7,7", "PAUSED")
        assert len(client.calls) == 2
        assert len(result.outcomes) == 2

    @pytest.mark.asyncio
    async def test_empty_ids_no_calls(self):
        """Test validation error happens before any request."""
        client = MockFacebookClient()
        with pytest.raises(FacebookValidationError):
            await bulk_set_status(client, "", "ACTIVE")
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_bad_action_no_calls(self):
        """Test unknown status is rejected before any request."""
        client = MockFacebookClient()
        with pytest.raises(FacebookValidationError):
            await bulk_set_status(client, "1,2", "DELETED")
        assert client.calls == []

    @pytest.mark.asyncio
    async def test_no_token_every_id_fails(self):
        """Test missing token is reported per id, not raised."""
        client = MockFacebookClient(access_token="")
        result = await bulk_set_status(client, "1,2", "PAUSED")
        assert len(result.failures) == 2
        assert "META_ACCESS_TOKEN" in result.failures[0].error_message

    @pytest.mark.asyncio
    async def test_ids_that_are_not_node_ids_fail_without_request(self):
        """Test ids with path or query characters never reach the API."""
        client = MockFacebookClient()
        result = await bulk_set_status(client, "555/copies, 777?deep_copy=true, 888#x, ../me, 999", "PAUSED")
        assert client.calls == [("POST", "999", {"status": "PAUSED"})]
        assert [o.id for o in result.failures] == ["555/copies", "777?deep_copy=true", "888#x", "../me"]
        assert all(o.error_message == "not an ad set id" for o in result.failures)
        assert [o.id for o in result.successes] == ["999"]
        assert len(result.successes) + len(result.failures) == 5

    @pytest.mark.asyncio
    async def test_edge_path_never_posted_over_http(self):
        """Test a copies edge in the id is not posted by the real client."""
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, request.url.path))
            return httpx.Response(200, json={"success": True})

        client = FacebookAdsClient("tok", "123", transport=httpx.MockTransport(handler))
        result = await bulk_set_status(client, "555/copies, 777?deep_copy=true, 555", "PAUSED")
        assert seen == [("POST", "/v19.0/555")]
        assert [(o.id, o.success) for o in result.outcomes] == [
            ("555/copies", False),
            ("777?deep_copy=true", False),
            ("555", True),
        ]
