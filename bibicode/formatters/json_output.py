"""JSON formatter for scripts and other programs.

WHY: Shell pipelines that feed bibicode output into other tools need
each input paired with its conversion, not a space-separated line that
breaks as soon as a digit contains a space.

HOW: Builds ``{"prefix": ..., "numbers": [{"input": ..., "output": ...}]}``
and validates it with jsonschema against conversion_output.schema.json
before serializing.

RULES:
- ``output`` carries the target prefix, like the separated format
- ``prefix`` repeats the target prefix once for consumers that strip it
- Non-ASCII digits are written as-is (ensure_ascii=False)
- Validate output against the schema before returning; raise on failure
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from bibicode.core.ir import ConversionBatch
from bibicode.formatters.base import BaseFormatter, OutputOptions

_SCHEMA_PATH = Path(__file__).resolve().parent / "conversion_output.schema.json"


def _load_schema() -> dict[str, Any]:
    """Load the output JSON schema from disk.

    Cached at module level after first call to avoid repeated I/O.
    """
    with open(_SCHEMA_PATH, encoding="utf-8") as f:
        return json.load(f)


_CACHED_SCHEMA: dict[str, Any] | None = None


def _get_schema() -> dict[str, Any]:
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        _CACHED_SCHEMA = _load_schema()
    return _CACHED_SCHEMA


class JSONFormatter(BaseFormatter):

    @property
    def name(self) -> str:
        return "JSON"

    def render(self, batch: ConversionBatch, options: OutputOptions) -> str:
        """Serialize the batch as a JSON document.

        Raises:
            jsonschema.ValidationError: If the document does not conform
                to conversion_output.schema.json.
        """
        output: dict[str, Any] = {
            "prefix": batch.prefix,
            "numbers": [
                {"input": number.entry, "output": batch.prefix + number.digits}
                for number in batch.numbers
            ],
        }

        jsonschema.validate(instance=output, schema=_get_schema())

        return json.dumps(output, indent=2, ensure_ascii=False)
