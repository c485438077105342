from __future__ import annotations

from pathlib import Path

import pytest

from shared.config import ToolConfig
from hillplayfair.ciphers import build_table
from hillplayfair.core.engine import HillPlayfairEngine
from hillplayfair.core.models import KeyMatrix, PlayfairTable


@pytest.fixture
def monarchy_table() -> PlayfairTable:
    return build_table("MONARCHY")


@pytest.fixture
def help_key() -> KeyMatrix:
    """Textbook 2x2 key; HELP encrypts to HIAT."""
    return KeyMatrix(rows=[[3, 3], [2, 5]])


@pytest.fixture
def engine() -> HillPlayfairEngine:
    return HillPlayfairEngine(ToolConfig(), console_logging=False)


@pytest.fixture
def input_files(tmp_path: Path) -> dict[str, Path]:
    key = tmp_path / "key.txt"
    plain = tmp_path / "plain.txt"
    keyword = tmp_path / "keyword.txt"
    key.write_text("2\n3 3\n2 5\n", encoding="utf-8")
    plain.write_text("HELP\n", encoding="utf-8")
    keyword.write_text("monarchy\n", encoding="utf-8")
    return {"key": key, "plain": plain, "keyword": keyword}


@pytest.fixture
def help_report() -> str:
    """Text report for HELP under ``help_key`` and keyword MONARCHY."""
    return (
        "Mode:\n"
        "Encryption Mode\n"
        "\n"
        "Original Plaintext:\n"
        "HELP\n"
        "\n"
        "\n"
        "Preprocessed Plaintext:\n"
        "HELP\n"
        "\n"
        "Hill Cipher Key Dimension:\n"
        "2\n"
        "\n"
        "Hill Cipher Key Matrix:\n"
        "   3   3\n"
        "   2   5\n"
        "\n"
        "Padded Hill Cipher Plaintext:\n"
        "HELP\n"
        "\n"
        "Ciphertext after Hill Cipher:\n"
        "HIAT\n"
        "\n"
        "Playfair Keyword:\n"
        "MONARCHY\n"
        "\n"
        "Playfair Table:\n"
        "M O N A R\n"
        "C H Y B D\n"
        "E F G I K\n"
        "L P Q S T\n"
        "U V W X Z\n"
        "\n"
        "Ciphertext after Playfair:\n"
        "BFRS\n"
    )
