"""Recover a JSON array of places from free-form model text."""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

_BRACKETED_ARRAY = re.compile(r"\[[\s\S]*\]")
_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")

Strategy = Callable[[str], Optional[List[Any]]]


@dataclass(frozen=True)
class ParseResult:
    strategy: str
    items: List[Any]


def _load_array(candidate: str) -> Optional[List[Any]]:
    loaded = json.loads(candidate)
    if isinstance(loaded, list):
        return loaded
    return None


def parse_whole_body(text: str) -> Optional[List[Any]]:
    """The model answered with nothing but the array."""
    return _load_array(text.strip())


def extract_bracketed_array(text: str) -> Optional[List[Any]]:
    """The array is wrapped in prose; take the widest ``[...]`` span."""
    match = _BRACKETED_ARRAY.search(text)
    if not match:
        return None
    return _load_array(match.group(0))


def extract_fenced_block(text: str) -> Optional[List[Any]]:
    """The array sits inside a markdown code fence, optionally tagged ``json``."""
    match = _FENCED_BLOCK.search(text)
    if not match or not match.group(1):
        return None
    return _load_array(match.group(1))


PARSE_STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    ("whole_body", parse_whole_body),
    ("bracketed_array", extract_bracketed_array),
    ("fenced_block", extract_fenced_block),
)


class ResponseParser:
    """Try each strategy in order and stop at the first JSON array."""

    def __init__(self, strategies: Sequence[Tuple[str, Strategy]] = PARSE_STRATEGIES) -> None:
        self._strategies = tuple(strategies)

    def parse(self, text: str) -> Optional[ParseResult]:
        for name, attempt in self._strategies:
            try:
                items = attempt(text)
            except (ValueError, RecursionError) as exc:
                logger.info("Strategy %s could not decode JSON: %s", name, exc)
                continue
            except Exception:
                logger.exception("Strategy %s failed", name)
                continue
            if items is None:
                logger.info("Strategy %s found no JSON array", name)
                continue
            logger.info("Parsed %d item(s) with strategy %s", len(items), name)
            return ParseResult(strategy=name, items=items)

        logger.error("Failed to parse JSON array from model response")
        return None
