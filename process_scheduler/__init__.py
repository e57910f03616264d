"""
Process scheduler package.

Simulates FCFS, Shortest Job First, Priority and unit-quantum Round-Robin
CPU scheduling over a workload file and reports the Gantt timeline and
per-process timing metrics.
"""

__all__ = ["cli"]
