from __future__ import annotations

import sys
from dataclasses import dataclass

import requests

from .colors import RESET, WARNING


class ImageHostError(RuntimeError):
    """Raised when the image host answers with a reply we cannot use."""


@dataclass
class ImageHostClient:
    upload_url: str
    api_key: str
    placeholder_url: str
    timeout: float = 1000.0

    def upload(self, filename: str, content: bytes) -> str:
        """
        Upload an image and return its public URL.

        A failed upload is not fatal: the placeholder image is returned so
        the form keeps one image per option and later items stay in place.
        """
        files = {"source": (filename, content)}
        data = {"key": self.api_key, "action": "upload"}
        try:
            response = requests.post(
                self.upload_url, files=files, data=data, timeout=self.timeout
            )
        except requests.exceptions.RequestException as exc:
            return self._fallback(f"{filename}: {exc}")

        if response.status_code != 200:
            return self._fallback(f"{filename}: bad status {response.status_code}")

        try:
            url = response.json()["image"]["url"]
        except (ValueError, KeyError, TypeError) as exc:
            raise ImageHostError(f"Unable to parse response: {exc}") from exc
        if not isinstance(url, str) or not url:
            raise ImageHostError("Unable to parse response: empty image url")
        return url

    def _fallback(self, reason: str) -> str:
        print(
            f"{WARNING}[WARN]{RESET} Upload failed ({reason}); "
            f"using placeholder {self.placeholder_url}",
            file=sys.stderr,
        )
        return self.placeholder_url
