import json
import unittest

import httpx

from core.activity_service import (
    ActivityFetchError,
    ActivityHTTPError,
    ActivityResponseError,
    ActivityService,
)
from models import ActivityListResponse, RawActivity


WALKS_URL = "https://walks.example.test/"


def _payload(activities, success=True, has_more=False, next_token=None, error=None):
    return {
        "success": success,
        "data": {"activities": activities, "hasMore": has_more, "nextToken": next_token},
        "error": error,
    }


class StubSettings:
    def __init__(self, values=None):
        self.values = values or {}

    def get_setting(self, key, default=None):
        return self.values.get(key, default)


class RawActivityDecodeTests(unittest.TestCase):
    def test_primary_key_fallbacks(self):
        self.assertEqual(RawActivity.from_dict({"activityId": "a1", "walkId": "w1"}).id, "a1")
        self.assertEqual(RawActivity.from_dict({"walkId": "w1"}).id, "w1")
        self.assertEqual(RawActivity.from_dict({}).id, "")

    def test_indoor_flag_explicit_or_derived(self):
        self.assertTrue(RawActivity.from_dict({"isIndoorWalk": True}).is_indoor_walk)
        self.assertTrue(RawActivity.from_dict({"isIndoorWalk": False, "walkType": "treadmillWalk"}).is_indoor_walk)
        self.assertTrue(RawActivity.from_dict({"isIndoorWalk": False, "activityType": "indoorWalk"}).is_indoor_walk)
        self.assertFalse(RawActivity.from_dict({"isIndoorWalk": False}).is_indoor_walk)
        self.assertTrue(RawActivity.from_dict({"walkType": "treadmillWalk"}).is_indoor_walk)
        self.assertTrue(RawActivity.from_dict({"activityType": "indoorWalk"}).is_indoor_walk)
        self.assertFalse(RawActivity.from_dict({"walkType": "outdoorWalk"}).is_indoor_walk)

    def test_numeric_fields_coerced(self):
        raw = RawActivity.from_dict({"duration": "120", "distance": None, "calories": "n/a", "steps": 42.0})
        self.assertEqual(raw.duration, 120.0)
        self.assertEqual(raw.distance, 0.0)
        self.assertEqual(raw.calories, 0.0)
        self.assertEqual(raw.steps, 42)
        self.assertIsNone(raw.avg_heart_rate)

    def test_non_finite_numbers_decode_as_zero(self):
        raw = RawActivity.from_dict({"duration": float("inf"), "distance": "nan", "calories": "-inf"})
        self.assertEqual(raw.duration, 0.0)
        self.assertEqual(raw.distance, 0.0)
        self.assertEqual(raw.calories, 0.0)
        payload = json.loads('{"duration": 1e999, "steps": 1e999}')
        raw = RawActivity.from_dict(payload)
        self.assertEqual(raw.duration, 0.0)
        self.assertIsNone(raw.steps)

    def test_response_without_data(self):
        response = ActivityListResponse.from_dict({"success": True})
        self.assertTrue(response.success)
        self.assertIsNone(response.data)


class ActivityServiceTests(unittest.IsolatedAsyncioTestCase):
    def _service(self, handler, db=None, base_url=WALKS_URL):
        self.client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return ActivityService(db=db, base_url=base_url, client=self.client)

    async def asyncTearDown(self):
        client = getattr(self, 'client', None)
        if client is not None:
            await client.aclose()

    async def test_get_walks_sends_query_and_decodes(self):
        seen = {}

        def handler(request):
            seen['params'] = dict(request.url.params)
            seen['host'] = request.url.host
            return httpx.Response(200, json=_payload(
                [{"walkId": "w1", "userId": "u1", "createdAt": "2025-01-05T07:04:11Z",
                  "duration": 600, "distance": 800, "calories": 40}],
                has_more=True,
                next_token="tok",
            ))

        service = self._service(handler)
        response = await service.get_walks("u1", limit=100)

        self.assertEqual(seen['host'], "walks.example.test")
        self.assertEqual(seen['params'], {"userId": "u1", "limit": "100", "includeRouteUrls": "true"})
        self.assertEqual(len(response.data.activities), 1)
        self.assertEqual(response.data.activities[0].id, "w1")
        self.assertTrue(response.data.has_more)
        self.assertEqual(response.data.next_token, "tok")

    async def test_next_token_is_forwarded(self):
        seen = {}

        def handler(request):
            seen['params'] = dict(request.url.params)
            return httpx.Response(200, json=_payload([]))

        service = self._service(handler)
        await service.get_walks("u1", limit=5, next_token="abc", include_route_urls=False)
        self.assertEqual(seen['params']['nextToken'], "abc")
        self.assertEqual(seen['params']['includeRouteUrls'], "false")

    async def test_http_error_status(self):
        service = self._service(lambda request: httpx.Response(503))
        with self.assertRaises(ActivityHTTPError) as ctx:
            await service.get_walks("u1")
        self.assertEqual(ctx.exception.status_code, 503)

    async def test_unsuccessful_body(self):
        service = self._service(lambda request: httpx.Response(200, json=_payload([], success=False, error="boom")))
        with self.assertRaises(ActivityFetchError) as ctx:
            await service.get_walks("u1")
        self.assertIn("boom", str(ctx.exception))

    async def test_invalid_json(self):
        service = self._service(lambda request: httpx.Response(200, content=b"<html>"))
        with self.assertRaises(ActivityResponseError):
            await service.get_walks("u1")

    async def test_url_override_from_settings(self):
        seen = {}

        def handler(request):
            seen['url'] = f"{request.url.scheme}://{request.url.host}{request.url.path}"
            return httpx.Response(200, content=json.dumps(_payload([])).encode())

        service = self._service(
            handler,
            db=StubSettings({"get_walks_url": "https://override.example.test/walks"}),
            base_url=None,
        )
        await service.get_walks("u1")
        self.assertEqual(seen['url'], "https://override.example.test/walks")


if __name__ == "__main__":
    unittest.main()
