"""Mainline API client returning the recent posts of an account."""
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional
from urllib.parse import quote

import requests

from kol_oracle.config import DEFAULT_API_KEY_HEADER, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from kol_oracle.domain.models import MainlineResponse

LOGGER = logging.getLogger(__name__)
TWEETS_PATH = "/api/tweets/handle/{handle}"
TEXT_FIELD = "tweet"


def tweets_url(handle: str, *, base_url: str = DEFAULT_BASE_URL) -> str:
    return base_url.rstrip("/") + TWEETS_PATH.format(handle=quote(handle, safe=""))


def _session() -> requests.Session:
    sess = requests.Session()
    sess.headers.update({"Accept": "application/json"})
    return sess


def _error_response(status_code: Optional[int] = None, raw: Optional[Mapping[str, Any]] = None) -> MainlineResponse:
    LOGGER.warning("Mainline Error")
    return MainlineResponse(error=True, data=[], status_code=status_code, raw=raw)


def fetch_tweets(
    handle: str,
    *,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    api_key_header: str = DEFAULT_API_KEY_HEADER,
    timeout: float = DEFAULT_TIMEOUT,
    session: Optional[requests.Session] = None,
) -> MainlineResponse:
    """
    Fetch the recent posts of ``handle`` with a single GET request.

    Remote problems never raise. Transport failures, non-2xx statuses, bodies
    that are not JSON objects and bodies flagging ``error`` all come back as a
    response with ``error`` set and no data.
    """
    url = tweets_url(handle, base_url=base_url)
    sess = session or _session()
    try:
        resp = sess.get(url, headers={api_key_header: api_key}, timeout=timeout)
    except requests.RequestException as exc:
        LOGGER.warning("Mainline request for %s failed: %s", handle, exc)
        return _error_response()

    status_code = resp.status_code
    try:
        payload = resp.json()
    except ValueError:
        LOGGER.warning("Mainline response for %s was not valid JSON (status=%s)", handle, status_code)
        return _error_response(status_code)
    LOGGER.debug("Mainline response for %s (status=%s): %s", handle, status_code, payload)

    if not isinstance(payload, Mapping):
        return _error_response(status_code)
    if not 200 <= status_code < 300 or payload.get("error"):
        return _error_response(status_code, payload)

    data = payload.get("data")
    if not isinstance(data, list):
        LOGGER.debug("Mainline response for %s has no data list", handle)
        data = []
    return MainlineResponse(error=False, data=list(data), status_code=status_code, raw=payload)


def extract_tweets(response: MainlineResponse) -> List[str]:
    """Return the post texts of a successful response in order, skipping malformed records."""
    if response.error:
        return []
    tweets: List[str] = []
    for index, record in enumerate(response.data):
        text = record.get(TEXT_FIELD) if isinstance(record, Mapping) else None
        if not isinstance(text, str):
            LOGGER.debug("Skipping malformed Mainline record at index %d: %r", index, record)
            continue
        tweets.append(text)
    return tweets


__all__ = ["extract_tweets", "fetch_tweets", "tweets_url"]
