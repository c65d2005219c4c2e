import json
import unittest

import httpx

from clients.profile_client import ProfileClient, SAMPLE_PROFILE, main
from models.profile import Profile


def make_transport(status_code: int = 200, requests_seen: list = None) -> httpx.MockTransport:
    def handle(request: httpx.Request) -> httpx.Response:
        if requests_seen is not None:
            requests_seen.append(request)
        if request.url.path == "/api/profile/save":
            return httpx.Response(status_code, json={"success": status_code == 200, "message": "ok", "rowKey": "abc"})
        if request.url.path == "/api/profile/all":
            return httpx.Response(status_code, json={"success": True, "message": "ok", "count": 1, "profiles": []})
        return httpx.Response(404)
    return httpx.MockTransport(handle)


class TestProfileClient(unittest.TestCase):
    def test_save_profile_posts_json(self):
        seen = []
        client = ProfileClient("https://profiles.example.com/", http_client=httpx.Client(transport=make_transport(requests_seen=seen)))

        self.assertTrue(client.save_profile(SAMPLE_PROFILE))

        request = seen[0]
        self.assertEqual(request.method, "POST")
        self.assertEqual(str(request.url), "https://profiles.example.com/api/profile/save")
        self.assertEqual(json.loads(request.content), {
            "name": "John", "surname": "Doe", "email": "john.doe@example.com", "age": "30",
        })

    def test_save_profile_error_status(self):
        client = ProfileClient("http://localhost", http_client=httpx.Client(transport=make_transport(status_code=500)))
        self.assertFalse(client.save_profile(Profile(name="Jane")))

    def test_save_profile_transport_error(self):
        def fail(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = ProfileClient("http://localhost", http_client=httpx.Client(transport=httpx.MockTransport(fail)))
        self.assertFalse(client.save_profile(SAMPLE_PROFILE))

    def test_get_all_profiles(self):
        client = ProfileClient("http://localhost", http_client=httpx.Client(transport=make_transport()))
        self.assertEqual(client.get_all_profiles()["count"], 1)

    def test_get_all_profiles_raises_on_error(self):
        client = ProfileClient("http://localhost", http_client=httpx.Client(transport=make_transport(status_code=500)))
        with self.assertRaises(httpx.HTTPStatusError):
            client.get_all_profiles()


class TestMain(unittest.TestCase):
    def test_main_success(self):
        seen = []
        http_client = httpx.Client(transport=make_transport(requests_seen=seen))

        exit_code = main(["--url", "http://localhost:8000", "--name", "Jane", "--list"], http_client=http_client)

        self.assertEqual(exit_code, 0)
        self.assertEqual(json.loads(seen[0].content)["name"], "Jane")
        self.assertEqual(seen[1].url.path, "/api/profile/all")

    def test_main_failure(self):
        http_client = httpx.Client(transport=make_transport(status_code=400))
        self.assertEqual(main(["--url", "http://localhost:8000"], http_client=http_client), 1)


if __name__ == '__main__':
    unittest.main()
