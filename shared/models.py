"""
Shared Data Models
===================

Pydantic v2 models shared by the hillplayfair tool layers: the severity
scale, individual run diagnostics, and the top-level :class:`RunResult`
emitted by every file-level run.

References:
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from collections import Counter
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Diagnostic severity level.

    Attributes:
        HIGH:     The run aborted (unreadable input, malformed key).
        MEDIUM:   The run completed but the output has a known weakness.
        LOW:      Minor observation about the inputs.
        INFO:     Informational note; no effect on correctness.
    """

    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"

    @property
    def label(self) -> str:
        """Human-readable label for this severity."""
        return self.value.capitalize() if self is not Severity.INFO else "Informational"

    @property
    def is_failure(self) -> bool:
        """Whether a diagnostic of this severity means the run aborted."""
        return self is Severity.HIGH


# ========================== Core Models ====================================


class Diagnostic(BaseModel):
    """A single observation recorded during a pipeline run.

    Attributes:
        severity:    Qualitative severity rating.
        title:       Short, descriptive title.
        description: Detailed explanation.
        evidence:    Raw data supporting the observation.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        extra="ignore",
    )

    severity: Severity = Field(..., description="Severity level")
    title: str = Field(..., min_length=1, max_length=256, description="Short title")
    description: str = Field(..., min_length=1, description="Detailed explanation")
    evidence: str = Field(default="", description="Supporting evidence")

    @field_validator("evidence", mode="before")
    @classmethod
    def _evidence_as_text(cls, value: Any) -> str:
        """Key matrices, determinants and file names arrive as dicts; store JSON."""
        if isinstance(value, (dict, list)):
            return _json.dumps(value, ensure_ascii=False, default=str)
        return value if isinstance(value, str) else str(value)


class RunResult(BaseModel):
    """Aggregated result of a single tool run.

    Attributes:
        tool_name:   Name of the tool that produced the result.
        target:      What was processed (usually the plaintext path).
        start_time:  UTC timestamp when the run started.
        end_time:    UTC timestamp when the run ended.
        diagnostics: Observations recorded during the run.
        summary:     Human-readable summary text.
        metadata:    Structured output (the pipeline trace).
    """

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
    )

    tool_name: str = Field(..., min_length=1)
    target: str = Field(..., min_length=1)
    start_time: _dt.datetime = Field(
        default_factory=lambda: _dt.datetime.now(_dt.timezone.utc),
    )
    end_time: Optional[_dt.datetime] = None
    diagnostics: list[Diagnostic] = Field(default_factory=list)
    summary: str = ""
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed run time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def succeeded(self) -> bool:
        """``True`` when no diagnostic signals an aborted run."""
        return not any(d.severity.is_failure for d in self.diagnostics)

    @property
    def severity_counts(self) -> dict[str, int]:
        """Count of diagnostics grouped by severity name."""
        seen = Counter(d.severity.value for d in self.diagnostics)
        return {s.value: seen[s.value] for s in Severity}

    def add_diagnostic(self, diagnostic: Diagnostic) -> None:
        """Append a diagnostic to the result."""
        self.diagnostics.append(diagnostic)

    def finalize(self, summary: str | None = None) -> RunResult:
        """Set *end_time* and, if given, *summary*. Returns ``self``."""
        self.end_time = _dt.datetime.now(_dt.timezone.utc)
        if summary is not None:
            self.summary = summary
        return self
