"""JSON export of a pin result.

Why JSON:
- Other tools and pipelines can pick up the CID without parsing console output.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import PinResult


def render_pin_result_json(result: PinResult) -> str:
    payload = result.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_pin_result_json(*, result: PinResult, output_path: Path) -> Path:
    """Write `PinResult` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_pin_result_json(result), encoding="utf-8")
    return output_path
