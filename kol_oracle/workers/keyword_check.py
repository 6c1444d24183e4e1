from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

import requests

from kol_oracle.adapters.http_mainline import extract_tweets, fetch_tweets
from kol_oracle.config import Settings, get_settings
from kol_oracle.domain.encoding import encode_result
from kol_oracle.domain.errors import ArgumentError, ConfigurationError
from kol_oracle.domain.matching import keywords_found, matching_keywords
from kol_oracle.domain.models import KeywordCheckResult, RequestParameters
from kol_oracle.workers import log_info, log_summary, worker_session

WORKER = "keyword_check"
HANDLE_INDEX = 2
KEYWORDS_INDEX = 3
KEYWORD_SEPARATOR = ","
API_KEY_SECRET = "apiKey"


def _positional(args: Sequence[Any], index: int, name: str) -> str:
    if len(args) <= index:
        raise ArgumentError(f"missing {name} argument at position {index}")
    value = args[index]
    if not isinstance(value, str):
        raise ArgumentError(f"{name} argument must be a string, got {type(value).__name__}")
    return value


def parse_arguments(args: Optional[Sequence[Any]]) -> RequestParameters:
    """Read the account handle and keyword list from ``[_, _, handle, keywords]``."""
    if args is None:
        raise ArgumentError("missing request arguments")
    handle = _positional(args, HANDLE_INDEX, "account identifier")
    if handle.startswith("@"):
        handle = handle[1:]
    if not handle:
        raise ArgumentError("account identifier must not be empty")

    raw_keywords = _positional(args, KEYWORDS_INDEX, "keywords")
    if not raw_keywords:
        raise ArgumentError("keywords must not be empty")
    keywords: List[str] = raw_keywords.split(KEYWORD_SEPARATOR)
    return RequestParameters(account_identifier=handle, keywords=keywords)


def _require_api_key(secrets: Optional[Mapping[str, Any]]) -> str:
    api_key = (secrets or {}).get(API_KEY_SECRET)
    if not api_key or not isinstance(api_key, str):
        raise ConfigurationError("MAINLINE_API_KEY environment variable not set.")
    return api_key


def check(
    args: Optional[Sequence[Any]],
    secrets: Optional[Mapping[str, Any]],
    *,
    session: Optional[requests.Session] = None,
    settings: Optional[Settings] = None,
) -> KeywordCheckResult:
    params = parse_arguments(args)
    api_key = _require_api_key(secrets)
    settings = settings or get_settings()

    with worker_session(WORKER, handle=params.account_identifier):
        response = fetch_tweets(
            params.account_identifier,
            api_key=api_key,
            base_url=settings.mainline_base_url,
            api_key_header=settings.mainline_api_key_header,
            timeout=settings.request_timeout,
            session=session,
        )
        if response.error:
            log_info(WORKER, "Mainline API error; treating as no posts")
        tweets = extract_tweets(response)
        hits = matching_keywords(tweets, params.keywords)
        found = keywords_found(tweets, params.keywords)
        if hits:
            log_info(WORKER, f"keywords found: {', '.join(hits)}")

    log_summary(WORKER, matched=len(hits), total=len(tweets), found=found)
    return KeywordCheckResult(
        params=params,
        tweets=tweets,
        hits=hits,
        found=found,
        encoded=encode_result(found),
    )


def invoke(
    args: Optional[Sequence[Any]],
    secrets: Optional[Mapping[str, Any]],
    *,
    session: Optional[requests.Session] = None,
    settings: Optional[Settings] = None,
) -> bytes:
    """Return the uint256 encoded keyword result for the oracle callback."""
    return check(args, secrets, session=session, settings=settings).encoded


__all__ = ["check", "invoke", "parse_arguments"]
