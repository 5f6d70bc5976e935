"""
Reporting: tables, workbook export and consistency checks over a result store.
"""

from .frame import export_excel, results_to_frame
from .validators import ValidationResult, validate_results

__all__ = [
    "results_to_frame",
    "export_excel",
    "ValidationResult",
    "validate_results",
]
