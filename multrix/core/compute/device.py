"""
CPU detection for the parallel multiply kernel.

Reports the processor name and how many workers the thread pool may use.
"""

from dataclasses import dataclass
import platform

from joblib import cpu_count


@dataclass(frozen=True)
class DeviceInfo:
    """
    Information about the compute device.
    
    Attributes:
        name: Human-readable processor name
        n_workers: Number of usable worker threads (at least 1)
    """
    name: str
    n_workers: int
    
    def __str__(self) -> str:
        return f"CPU ({self.name}, {self.n_workers} workers)"
    

def get_cpu_info() -> DeviceInfo:
    """
    Get CPU device info.
    
    The worker count comes from joblib, which honours cgroup and
    affinity limits.
    """
    processor = platform.processor()
    if not processor:
        processor = platform.machine() or "Unknown CPU"
    
    return DeviceInfo(
        name=processor,
        n_workers=max(1, cpu_count()),
    )


def resolve_n_jobs(n_jobs: int | None) -> int:
    """
    Turn a user n_jobs request into a positive worker count.
    
    Args:
        n_jobs: None for all available workers, or a positive integer
        
    Raises:
        ValueError: If n_jobs is not None and not a positive integer
    """
    if n_jobs is None:
        return get_cpu_info().n_workers
    if isinstance(n_jobs, bool) or not isinstance(n_jobs, int) or n_jobs < 1:
        raise ValueError(f"n_jobs must be a positive integer or None, got {n_jobs!r}")
    return n_jobs
