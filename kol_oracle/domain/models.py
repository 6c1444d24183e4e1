"""Domain dataclasses shared across the keyword check."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence


@dataclass(slots=True, frozen=True)
class RequestParameters:
    account_identifier: str
    keywords: Sequence[str]


@dataclass(slots=True)
class MainlineResponse:
    error: bool
    data: List[Any] = field(default_factory=list)
    status_code: Optional[int] = None
    raw: Optional[Mapping[str, Any]] = None


@dataclass(slots=True)
class KeywordCheckResult:
    params: RequestParameters
    tweets: List[str]
    hits: List[str]
    found: bool
    encoded: bytes

    def to_dict(self) -> dict[str, object]:
        return {
            "handle": self.params.account_identifier,
            "keywords": list(self.params.keywords),
            "tweets": len(self.tweets),
            "hits": list(self.hits),
            "found": self.found,
            "result": int(self.found),
            "encoded": "0x" + self.encoded.hex(),
        }


__all__ = ["KeywordCheckResult", "MainlineResponse", "RequestParameters"]
