import sys
from pathlib import Path

import pytest

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import ProjectionConfig  # noqa: E402
from engine.cashflow import CashflowEngine  # noqa: E402


@pytest.fixture
def make_engine():
    """Factory: make_engine(periods, **config_kwargs) -> CashflowEngine."""

    def _make(periods=3, **kwargs):
        return CashflowEngine(ProjectionConfig(periods=periods, **kwargs))

    return _make
