"""
Pipeline Engine
================

Central orchestrator for the Hill -> Playfair pipeline. The
:class:`HillPlayfairEngine` sequences the stages

    normalize -> pad -> Hill encrypt -> build table -> split -> Playfair encrypt

and records every intermediate artifact in a :class:`PipelineTrace`.
:meth:`HillPlayfairEngine.encrypt_files` wraps a run over key, plaintext
and keyword files in the shared :class:`RunResult` model.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley. (Facade)
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from shared.config import ToolConfig
from shared.logger import ToolLogger
from shared.math_utils import integer_determinant, is_invertible_mod
from shared.models import Diagnostic, RunResult, Severity

from hillplayfair.ciphers import (
    HillCipher,
    PlayfairCipher,
    build_table,
    normalize,
    pad_to_block,
    sanitize_keyword,
    split_digraphs,
)
from hillplayfair.core.errors import DimensionMismatchError, HillPlayfairError
from hillplayfair.core.models import (
    PLAYFAIR_ALPHABET,
    DigraphRule,
    KeyMatrix,
    PipelineTrace,
)
from hillplayfair.parsers.key_parser import KeyParser

TOOL_NAME = "hillplayfair"


class HillPlayfairEngine:
    """Runs the Hill -> Playfair pipeline and surfaces its artifacts.

    Usage::

        engine = HillPlayfairEngine()
        trace = engine.run("Attack at dawn", KeyMatrix(rows=[[3, 3], [2, 5]]), "MONARCHY")
        trace.playfair_ciphertext

        result = engine.encrypt_files(Path("key.txt"), Path("plain.txt"), Path("keyword.txt"))

    Attributes:
        config: Tool configuration.
        logger: Logger for the engine.
    """

    def __init__(
        self,
        config: Optional[ToolConfig] = None,
        *,
        console_logging: bool = True,
    ) -> None:
        self.config = config or ToolConfig()
        settings = self.config.global_settings
        self.logger = ToolLogger(
            "engine",
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
            console_output=console_logging,
        )

        pipeline = self.config.pipeline
        self.filler = pipeline.filler.upper()
        if len(self.filler) != 1 or self.filler not in PLAYFAIR_ALPHABET:
            raise HillPlayfairError(
                f"Filler must be a single letter A-Z other than J, got {pipeline.filler!r}"
            )
        self.max_key_dimension = pipeline.max_key_dimension
        self._key_parser = KeyParser(max_dimension=self.max_key_dimension)

    # ------------------------------------------------------------------ #
    #  Pipeline
    # ------------------------------------------------------------------ #

    def run(self, plaintext: str, key: KeyMatrix, keyword: str) -> PipelineTrace:
        """Encrypt *plaintext* with the Hill key, then the Playfair keyword.

        Args:
            plaintext: Raw plaintext; non-letters are dropped.
            key: Hill key matrix.
            keyword: Raw Playfair keyword.

        Returns:
            The full trace of the run.

        Raises:
            DimensionMismatchError: If the key is larger than the configured
                maximum dimension.
        """
        n = key.dimension
        if n > self.max_key_dimension:
            raise DimensionMismatchError(
                f"Key dimension {n} exceeds the maximum of {self.max_key_dimension}"
            )

        with self.logger.operation("hill"):
            normalized = normalize(plaintext)
            padded = pad_to_block(normalized, n, self.filler)
            hill_ciphertext = HillCipher(key).encrypt(padded)
            self.logger.debug(
                "Hill stage: %d letters, %d padding, block size %d",
                len(normalized), len(padded) - len(normalized), n,
            )

        with self.logger.operation("playfair"):
            sanitized = sanitize_keyword(keyword)
            table = build_table(sanitized)
            digraphs = split_digraphs(hill_ciphertext, self.filler)
            playfair = PlayfairCipher(table, self.filler)
            playfair_ciphertext = playfair.encrypt_digraphs(digraphs)
            self.logger.debug(
                "Playfair stage: %d digraphs, keyword %r", len(digraphs), sanitized,
            )

        return PipelineTrace(
            original_plaintext=plaintext,
            normalized_plaintext=normalized,
            key=key,
            padded_plaintext=padded,
            hill_ciphertext=hill_ciphertext,
            sanitized_keyword=sanitized,
            table=table,
            digraphs=[str(d) for d in digraphs],
            rule_counts={rule.value: playfair.rule_counts[rule] for rule in DigraphRule},
            playfair_ciphertext=playfair_ciphertext,
            diagnostics=self._diagnose(key, normalized, sanitized),
        )

    # ------------------------------------------------------------------ #
    #  File-level run
    # ------------------------------------------------------------------ #

    def encrypt_files(
        self,
        key_path: Path,
        plaintext_path: Path,
        keyword_path: Path,
    ) -> RunResult:
        """Read the three input files and run the pipeline over them.

        Unreadable files and malformed keys abort the run: they are
        logged and recorded as HIGH severity diagnostics instead of a
        trace.

        Returns:
            RunResult whose ``metadata`` holds the dumped
            :class:`PipelineTrace` on success.
        """
        result = RunResult(
            tool_name=TOOL_NAME,
            target=str(plaintext_path),
            start_time=datetime.now(timezone.utc),
        )

        self.logger.info(f"Starting encryption: {plaintext_path}")

        with self.logger.timed("hill-playfair encryption"):
            try:
                key = self._key_parser.parse_file(key_path)
                plaintext = self._read_text(plaintext_path)
                keyword = self._read_text(keyword_path)
                trace = self.run(plaintext, key, keyword)
            except FileNotFoundError as exc:
                self.logger.error(f"File not found: {exc.filename}")
                result.add_diagnostic(Diagnostic(
                    severity=Severity.HIGH,
                    title="File Not Found",
                    description=f"The specified file could not be found: {exc.filename}",
                ))
                return result.finalize(f"Error: file not found ({exc.filename})")
            except PermissionError as exc:
                self.logger.error(f"Permission denied: {exc.filename}")
                result.add_diagnostic(Diagnostic(
                    severity=Severity.HIGH,
                    title="Permission Denied",
                    description=f"Insufficient permissions to read: {exc.filename}",
                ))
                return result.finalize(f"Error: permission denied ({exc.filename})")
            except HillPlayfairError as exc:
                self.logger.error(f"Invalid key in {key_path}: {exc}")
                result.add_diagnostic(Diagnostic(
                    severity=Severity.HIGH,
                    title="Malformed Key",
                    description=str(exc),
                    evidence={"key_file": str(key_path), "error": type(exc).__name__},
                ))
                return result.finalize(f"Error: invalid key ({exc})")

        result.metadata = trace.model_dump(mode="json")
        result.diagnostics.extend(trace.diagnostics)
        return result.finalize(
            f"Encrypted {len(trace.normalized_plaintext)} letters into "
            f"{len(trace.playfair_ciphertext)} letters "
            f"(n={trace.key_dimension}, keyword={trace.sanitized_keyword or '<empty>'})"
        )

    # ------------------------------------------------------------------ #
    #  Private Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _read_text(path: Path) -> str:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    def _diagnose(
        self,
        key: KeyMatrix,
        normalized: str,
        sanitized_keyword: str,
    ) -> list[Diagnostic]:
        diagnostics: list[Diagnostic] = []

        if not normalized:
            diagnostics.append(Diagnostic(
                severity=Severity.INFO,
                title="Empty Plaintext",
                description="The plaintext contains no letters; the ciphertext is empty.",
            ))

        if not sanitized_keyword:
            diagnostics.append(Diagnostic(
                severity=Severity.INFO,
                title="Empty Keyword",
                description=(
                    "The keyword contains no letters; the Playfair table is the "
                    "plain alphabet without J."
                ),
            ))

        if not is_invertible_mod(key.rows):
            det = integer_determinant(key.rows)
            self.logger.warning(f"Key matrix is not invertible mod 26 (det={det})")
            diagnostics.append(Diagnostic(
                severity=Severity.MEDIUM,
                title="Key Matrix Not Invertible",
                description=(
                    f"det(K) = {det} shares a factor with 26, so distinct plaintext "
                    f"blocks can encrypt to the same Hill ciphertext block."
                ),
                evidence={"determinant": det, "determinant_mod_26": det % 26},
            ))

        if key.has_negative_entries:
            diagnostics.append(Diagnostic(
                severity=Severity.LOW,
                title="Negative Key Entries",
                description="The key holds negative entries; they are reduced modulo 26.",
            ))

        return diagnostics
