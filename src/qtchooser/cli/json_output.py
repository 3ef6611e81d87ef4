"""JSON output utilities for CLI commands with machine-parseable output."""

import json
from typing import Any

from pydantic import BaseModel

from qtchooser.cli.output import machine_output


def emit_json(data: dict[str, Any]) -> None:
    """Output JSON data to stdout for machine consumption.

    For Pydantic models, call model.model_dump(mode='json') before
    passing to this function, or use emit_model().
    """
    machine_output(json.dumps(data, indent=2))


def emit_model(model: BaseModel) -> None:
    """Serialize a validated response model and emit it as JSON."""
    emit_json(model.model_dump(mode="json"))
