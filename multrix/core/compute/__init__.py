"""
Shared compute infrastructure for multrix.

Submodules:
    device: CPU worker detection
    timing: Execution timing utilities
    tolerances: Pivot tolerance and comparison tiers
    linalg: Elimination and multiply kernels
"""

from multrix.core.compute.device import DeviceInfo, get_cpu_info, resolve_n_jobs
from multrix.core.compute.timing import Timer
from multrix.core.compute.tolerances import PIVOT_TOLERANCE, ToleranceTier

__all__ = [
    # Device detection
    "DeviceInfo",
    "get_cpu_info",
    "resolve_n_jobs",
    # Timing
    "Timer",
    # Tolerances
    "PIVOT_TOLERANCE",
    "ToleranceTier",
]
