"""Domain-level objects shared across workers and adapters."""

from __future__ import annotations

from .encoding import decode_uint256, encode_result, encode_uint256, to_hex
from .errors import ArgumentError, ConfigurationError
from .matching import keywords_found, matching_keywords
from .models import KeywordCheckResult, MainlineResponse, RequestParameters

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "KeywordCheckResult",
    "MainlineResponse",
    "RequestParameters",
    "decode_uint256",
    "encode_result",
    "encode_uint256",
    "keywords_found",
    "matching_keywords",
    "to_hex",
]
