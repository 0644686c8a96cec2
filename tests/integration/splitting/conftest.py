from pathlib import Path

import pytest

FIXTURES = Path(__file__).parents[2] / "fixtures"


@pytest.fixture(scope="module")
def installation_en() -> str:
    """English "Installation" chapter of the Rust book."""
    return (FIXTURES / "installation.en.md").read_text(encoding="utf-8")


@pytest.fixture(scope="module")
def installation_ja() -> str:
    """Japanese translation, with the English source kept in HTML comments."""
    return (FIXTURES / "installation.ja.md").read_text(encoding="utf-8")
