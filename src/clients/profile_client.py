"""
HTTP client for a deployed profile registration service.

Usage:
    python -m clients.profile_client --url https://example.execute-api.eu-west-1.amazonaws.com
"""
import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

import httpx

from models.profile import Profile

logger = logging.getLogger(__name__)

SAMPLE_PROFILE = Profile(name="John", surname="Doe", email="john.doe@example.com", age="30")


class ProfileClient:
    """Posts and lists profiles through the /api/profile endpoints."""

    def __init__(self, base_url: str, http_client: Optional[httpx.Client] = None, timeout_s: float = 30.0):
        self.base_url = base_url.rstrip('/')
        self._client = http_client or httpx.Client(timeout=httpx.Timeout(timeout_s))

    def close(self) -> None:
        self._client.close()

    def save_profile(self, profile: Profile) -> bool:
        """
        Save a profile.

        Returns:
            True on a 2xx response, False on any other status or a transport error
        """
        try:
            response = self._client.post(
                f"{self.base_url}/api/profile/save",
                json=profile.model_dump(),
            )
        except httpx.HTTPError as e:
            logger.error(f"Exception occurred while saving profile: {str(e)}")
            return False

        if response.is_success:
            logger.info(f"Profile saved successfully: {response.text}")
            return True

        logger.error(f"Error saving profile ({response.status_code}): {response.text}")
        return False

    def get_all_profiles(self) -> Dict[str, Any]:
        """Fetch every stored profile; raises httpx.HTTPStatusError on a non-2xx response."""
        response = self._client.get(f"{self.base_url}/api/profile/all")
        response.raise_for_status()
        return response.json()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Save a profile to a running profile registration service")
    parser.add_argument('--url', required=True, help='Base URL of the service, e.g. http://localhost:8000')
    parser.add_argument('--name', default=SAMPLE_PROFILE.name)
    parser.add_argument('--surname', default=SAMPLE_PROFILE.surname)
    parser.add_argument('--email', default=SAMPLE_PROFILE.email)
    parser.add_argument('--age', default=SAMPLE_PROFILE.age)
    parser.add_argument('--list', action='store_true', help='List all profiles after saving')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None, http_client: Optional[httpx.Client] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = parse_args(argv)

    client = ProfileClient(args.url, http_client=http_client)
    try:
        profile = Profile(name=args.name, surname=args.surname, email=args.email, age=args.age)
        if not client.save_profile(profile):
            return 1
        if args.list:
            body = client.get_all_profiles()
            logger.info(f"Service holds {body.get('count', 0)} profiles")
        return 0
    finally:
        client.close()


if __name__ == '__main__':
    sys.exit(main())
