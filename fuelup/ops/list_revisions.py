"""Listing the published revisions of the 'latest' channel."""

from __future__ import annotations

import json
import logging
import urllib.request

logger = logging.getLogger(__name__)

REVISIONS_URL = (
    "https://api.github.com/repos/fuellabs/fuelup/contents/channels/latest?ref=gh-pages"
)


def strip_channel_name(name: str) -> str:
    """Turn ``channel-fuel-latest-2023-01-27.toml`` into ``latest-2023-01-27``.

    Names that do not have that shape are returned unchanged.
    """
    prefix, suffix = "channel-fuel-", ".toml"
    if name.startswith(prefix) and name.endswith(suffix) and len(name) >= len(prefix) + len(suffix):
        return name[len(prefix) : len(name) - len(suffix)]
    return name


def list_revisions() -> list[str]:
    """Fetch the available 'latest' revisions, newest first."""
    request = urllib.request.Request(REVISIONS_URL, headers={"User-Agent": "fuelup"})
    with urllib.request.urlopen(request) as response:
        contents = json.loads(response.read())

    revisions = [strip_channel_name(entry["name"]) for entry in reversed(contents)]
    listing = "".join(f"{revision}\n" for revision in revisions)
    logger.info("\n'latest' revisions available:\n%s", listing)
    return revisions