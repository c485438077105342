import pytest
from pydantic import ValidationError

from shared.models import Diagnostic, RunResult, Severity
from hillplayfair.core.models import Digraph, KeyMatrix


def test_key_matrix_must_be_square():
    with pytest.raises(ValidationError):
        KeyMatrix(rows=[[1, 2], [3]])
    with pytest.raises(ValidationError):
        KeyMatrix(rows=[])


def test_key_matrix_is_frozen(help_key):
    with pytest.raises(ValidationError):
        help_key.rows = [[1]]


def test_key_matrix_identity():
    assert KeyMatrix.identity(3).rows == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert not KeyMatrix.identity(3).has_negative_entries


def test_digraph_str():
    assert str(Digraph("A", "B")) == "AB"


def test_diagnostic_evidence_coerced_to_json():
    diagnostic = Diagnostic(
        severity=Severity.LOW, title="t", description="d", evidence={"det": 2}
    )
    assert diagnostic.evidence == '{"det": 2}'


def test_run_result_success_and_counts():
    result = RunResult(tool_name="hillplayfair", target="plain.txt")
    assert result.succeeded
    assert result.duration_seconds is None

    result.add_diagnostic(Diagnostic(severity=Severity.INFO, title="a", description="a"))
    assert result.succeeded
    result.add_diagnostic(Diagnostic(severity=Severity.HIGH, title="b", description="b"))
    assert not result.succeeded
    assert result.severity_counts["HIGH"] == 1
    assert result.severity_counts["INFO"] == 1
    assert set(result.severity_counts) == {"HIGH", "MEDIUM", "LOW", "INFO"}

    result.finalize("done")
    assert result.summary == "done"
    assert result.duration_seconds >= 0


def test_severity_labels():
    assert Severity.INFO.label == "Informational"
    assert Severity.HIGH.label == "High"
    assert Severity.HIGH.is_failure
    assert not Severity.MEDIUM.is_failure
