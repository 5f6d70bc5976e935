"""
Sample scenarios wired on top of the engine.
"""

from .amortization import build_amortization_engine
from .rent_escalation import build_rent_escalation_engine

__all__ = ["build_amortization_engine", "build_rent_escalation_engine"]
