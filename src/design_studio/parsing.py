from __future__ import annotations

import copy
import json
import logging
from dataclasses import dataclass
from typing import Any, Literal

from design_studio.errors import ResponseShapeError

logger = logging.getLogger(__name__)

ParseMode = Literal["fail", "fallback_raw", "substitute_default"]


@dataclass(frozen=True)
class ParsePolicy:
    """
    What to do when provider text that should be JSON is not.

    - fail: raise ResponseShapeError carrying the raw text as details
    - fallback_raw: return {"rawResponse": <text>}
    - substitute_default: return a copy of `default`
    """

    mode: ParseMode
    default: Any = None

    @classmethod
    def fail(cls) -> ParsePolicy:
        return cls(mode="fail")

    @classmethod
    def fallback_raw(cls) -> ParsePolicy:
        return cls(mode="fallback_raw")

    @classmethod
    def substitute(cls, value: Any) -> ParsePolicy:
        return cls(mode="substitute_default", default=value)


def parse_json_response(
    text: str | None,
    policy: ParsePolicy,
    *,
    label: str,
    expect: type | None = None,
    expect_items: type | None = None,
) -> Any:
    value, _ = parse_json_outcome(text, policy, label=label, expect=expect, expect_items=expect_items)
    return value


def parse_json_outcome(
    text: str | None,
    policy: ParsePolicy,
    *,
    label: str,
    expect: type | None = None,
    expect_items: type | None = None,
) -> tuple[Any, bool]:
    """
    Like parse_json_response, but also reports whether the provider text parsed.

    The flag is False whenever the policy's failure value was returned instead.
    `expect_items` checks every element when the parsed value is a list.
    """
    raw = text or ""
    try:
        parsed = json.loads(raw.strip())
    except ValueError as exc:
        return _on_failure(raw, policy, label, f"{label} response is not valid JSON: {exc}"), False

    if expect is not None and not isinstance(parsed, expect):
        return _on_failure(raw, policy, label, f"{label} response is not a JSON {expect.__name__}"), False
    if expect_items is not None and isinstance(parsed, list):
        if not all(isinstance(item, expect_items) for item in parsed):
            message = f"{label} response items are not all {expect_items.__name__}"
            return _on_failure(raw, policy, label, message), False
    return parsed, True


def _on_failure(raw: str, policy: ParsePolicy, label: str, message: str) -> Any:
    if policy.mode == "fail":
        raise ResponseShapeError(message, details=raw)
    if policy.mode == "fallback_raw":
        logger.warning("%s: returning raw provider text", message)
        return {"rawResponse": raw}
    logger.warning("%s: substituting default for %s", message, label)
    return copy.deepcopy(policy.default)
