"""
Shared helpers: time input conversion and SDK diagnostics.
"""

from .timeutils import TimeInput, now_ns, to_time_ns
from .diag import enable_verbose_diagnostics, disable_verbose_diagnostics

__all__ = [
    "TimeInput",
    "now_ns",
    "to_time_ns",
    "enable_verbose_diagnostics",
    "disable_verbose_diagnostics",
]
