"""CLI utility functions."""

import logging
import os
from typing import Any, Dict, Optional

import psutil


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"
    else:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        secs = seconds % 60
        return f"{hours}h {minutes}m {secs:.1f}s"


def format_memory(bytes_used: int) -> str:
    """Format memory usage in human-readable format."""
    if bytes_used < 1024:
        return f"{bytes_used}B"
    elif bytes_used < 1024**2:
        return f"{bytes_used/1024:.1f}KB"
    elif bytes_used < 1024**3:
        return f"{bytes_used/1024**2:.1f}MB"
    else:
        return f"{bytes_used/1024**3:.1f}GB"


def current_memory_usage() -> int:
    """Resident set size of this process in bytes."""
    return psutil.Process(os.getpid()).memory_info().rss


def print_summary(summary: Dict[str, Any]) -> None:
    """Print run summary.

    Args:
        summary: Summary dictionary produced by the run command
    """
    print("\n" + "="*60)
    print("SEARCH SUMMARY")
    print("="*60)

    print(f"Algorithm:        {summary['algorithm']}")
    print(f"Maze size:        {summary['width']}x{summary['height']}")
    print(f"Best score:       {summary['best_score']}")
    print(f"Iterations:       {summary['iterations']} ({summary['termination_reason']})")
    print(f"Records found:    {summary['statistics']['records_found']}")

    cache_stats = summary['cache_stats']
    print(f"\nCache:")
    print(f"Layouts scored:   {cache_stats['size']}")
    print(f"Hit rate:         {cache_stats['hit_rate']*100:.1f}%")

    print(f"\nResources:")
    print(f"Total time:       {format_duration(summary['total_time'])}")
    print(f"Memory (RSS):     {format_memory(summary['memory_bytes'])}")
    if summary.get('write_failures'):
        print(f"Write failures:   {summary['write_failures']}")
