"""
Report Generator
=================

Renders pipeline runs as plain-text and JSON reports.

The text report reproduces the reference layout of the classic
``hillplayfair encrypt`` tool: one titled block per artifact, long letter
strings wrapped at a fixed column count without altering letter order.
The JSON report is the serialised :class:`RunResult` for integration with
other tools.
"""

from __future__ import annotations

import json
from pathlib import Path

from shared.models import RunResult
from hillplayfair.core.models import PipelineTrace


def wrap_letters(text: str, width: int = 80) -> str:
    """Break *text* into lines of at most *width* characters.

    >>> wrap_letters("ABCDEFG", 3)
    'ABC\\nDEF\\nG'
    """
    if width <= 0:
        return text
    return "\n".join(text[i:i + width] for i in range(0, len(text), width))


class PipelineReportGenerator:
    """Generates text and JSON reports from pipeline runs.

    Usage::

        reporter = PipelineReportGenerator(wrap_width=80)
        print(reporter.render_text(trace), end="")
        reporter.generate_json(result, Path("run.json"))
    """

    def __init__(self, wrap_width: int = 80, matrix_indent: int = 3) -> None:
        self.wrap_width = wrap_width
        self.matrix_indent = matrix_indent

    def render_text(self, trace: PipelineTrace) -> str:
        """Render *trace* in the reference text layout."""
        width = self.wrap_width
        lead = " " * self.matrix_indent

        parts = [
            "Mode:\nEncryption Mode\n\n",
            f"Original Plaintext:\n{trace.original_plaintext}\n",
            f"\nPreprocessed Plaintext:\n{wrap_letters(trace.normalized_plaintext, width)}\n",
            f"\nHill Cipher Key Dimension:\n{trace.key_dimension}\n\n",
            "Hill Cipher Key Matrix:\n",
        ]
        for row in trace.key.rows:
            parts.append(lead + lead.join(str(v) for v in row) + "\n")
        parts.append("\n")

        parts.append(f"Padded Hill Cipher Plaintext:\n{wrap_letters(trace.padded_plaintext, width)}\n")
        parts.append(f"\nCiphertext after Hill Cipher:\n{wrap_letters(trace.hill_ciphertext, width)}\n")
        parts.append(f"\nPlayfair Keyword:\n{trace.sanitized_keyword}\n\n")

        parts.append("Playfair Table:\n")
        for row in trace.table.rows:
            parts.append(" ".join(row) + "\n")
        parts.append("\n")

        parts.append(f"Ciphertext after Playfair:\n{wrap_letters(trace.playfair_ciphertext, width)}\n")
        return "".join(parts)

    def generate_text(self, trace: PipelineTrace, output_path: Path) -> Path:
        """Write the text report to *output_path* and return the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_text(trace), encoding="utf-8")
        return output_path

    def generate_json(self, result: RunResult, output_path: Path) -> Path:
        """Write *result* as indented JSON to *output_path* and return the path."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result), encoding="utf-8")
        return output_path

    @staticmethod
    def render_json(result: RunResult) -> str:
        payload = result.model_dump(mode="json")
        payload["succeeded"] = result.succeeded
        payload["duration_seconds"] = result.duration_seconds
        return json.dumps(payload, indent=2, ensure_ascii=False)
