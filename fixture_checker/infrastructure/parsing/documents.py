"""JSON document reader."""
from __future__ import annotations

import json
from typing import Any

from fixture_checker.domain.errors import FixtureParseError


def read_json(content: bytes) -> Any:
    try:
        return json.loads(content)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise FixtureParseError("JSON", str(exc)) from exc
