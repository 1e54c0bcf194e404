from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Mapping
import json
import re

DEFAULT_TABLE = Path(__file__).with_name("tickers_nse.json")

_SUFFIX_RE = re.compile(
    r"\s*\b(Ltd|Limited|Inc|Incorporated|Corp|Corporation|Private|Pvt|Company|Co)\s*\.?$",
    re.IGNORECASE,
)


def strip_suffix(name: str) -> str:
    return _SUFFIX_RE.sub("", name).strip()


@dataclass(frozen=True)
class TickerMap:
    """Read-only company name -> exchange symbol table.

    Load once (e.g. at startup) and pass the instance to whatever needs it.
    """
    symbols: Mapping[str, str]
    suffix: str = ".NS"

    @staticmethod
    def from_mapping(symbols: Mapping[str, str], suffix: str = ".NS") -> "TickerMap":
        return TickerMap(symbols=MappingProxyType(dict(symbols)), suffix=suffix)

    @staticmethod
    def from_json_path(path: str | Path) -> "TickerMap":
        data = json.loads(Path(path).read_text())
        return TickerMap.from_mapping(data.get("symbols", {}), suffix=data.get("suffix", ".NS"))

    @staticmethod
    def default() -> "TickerMap":
        return TickerMap.from_json_path(DEFAULT_TABLE)

    def symbol_for(self, company_name: str) -> str:
        """Map a company name to a symbol.

        - exact key
        - case-insensitive key on the trimmed name
        - both sides with a trailing corporate suffix (Ltd, Inc, Corp, ...) removed
        - otherwise generate one: suffix-stripped, alphanumerics only, upper-case, plus `.NS`
        """
        if company_name in self.symbols:
            return self.symbols[company_name]

        lower = company_name.strip().lower()
        for key, sym in self.symbols.items():
            if key.lower() == lower:
                return sym

        base = strip_suffix(company_name).lower()
        for key, sym in self.symbols.items():
            if strip_suffix(key).lower() == base:
                return sym

        generated = re.sub(r"[^A-Za-z0-9]", "", strip_suffix(company_name)).upper()
        return f"{generated}{self.suffix}"
