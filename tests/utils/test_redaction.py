from __future__ import annotations

from spotify_catalog.utils import mask_secret, redact_headers


def test_redact_headers_masks_credentials() -> None:
    redacted = redact_headers(
        {
            "Authorization": "Bearer abcdefghijklmnop",
            "If-None-Match": '"etag"',
        }
    )

    assert redacted["Authorization"] == "Bearer ********mnop"
    assert redacted["If-None-Match"] == '"etag"'


def test_mask_secret_short_values() -> None:
    assert mask_secret("abc") == "***"
    assert mask_secret(None) == ""
