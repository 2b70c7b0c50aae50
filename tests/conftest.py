from pathlib import Path

import pytest

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def sample_cfg() -> str:
    return str(EXAMPLES_DIR / "sample.cfg")


@pytest.fixture
def lint_findings_cfg() -> str:
    return str(EXAMPLES_DIR / "lint-findings.cfg")
