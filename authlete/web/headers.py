"""
Case-insensitive, multi-valued HTTP header map backed by ``httpx.Headers``.
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

import httpx


class HttpHeaders:
    """
    Header names are matched ignoring case; the spelling of the first
    occurrence is kept for output.

    ``headers`` is anything ``httpx.Headers`` accepts, including the
    ``headers`` of an ``httpx.Response``.
    """

    def __init__(self, headers: Any = None):
        self._headers = httpx.Headers(headers)

    @property
    def headers(self) -> httpx.Headers:
        return self._headers

    def add(self, name: Optional[str], value: str) -> "HttpHeaders":
        if not name:
            return self
        self._headers = httpx.Headers([*self._headers.raw, (name, value)])
        return self

    def get(self, name: Optional[str]) -> Optional[List[str]]:
        if not name:
            return None
        return self._headers.get_list(name) or None

    def get_first(self, name: Optional[str]) -> Optional[str]:
        values = self.get(name)
        if not values:
            return None
        return values[0]

    def as_dict(self) -> Dict[str, List[str]]:
        encoding = self._headers.encoding
        spellings: Dict[str, str] = {}
        result: Dict[str, List[str]] = {}
        for raw_name, raw_value in self._headers.raw:
            name = raw_name.decode(encoding)
            spelling = spellings.setdefault(name.lower(), name)
            result.setdefault(spelling, []).append(raw_value.decode(encoding))
        return result

    def __contains__(self, name) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._headers)

    @classmethod
    def parse(cls, text: Optional[str]) -> "HttpHeaders":
        """Parse raw header lines such as ``Name: value``."""
        pairs = []
        for line in (text or '').splitlines():
            name, sep, value = line.partition(':')
            name = name.strip()
            if sep and name:
                pairs.append((name, value.strip()))
        return cls(pairs)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "HttpHeaders":
        return cls([(name, value) for name, value in pairs if name])

    def __repr__(self) -> str:
        return f"HttpHeaders({self.as_dict()!r})"
