"""
Batch CPU scheduling simulator.

Loads a process workload from a text file, simulates FCFS and Round Robin
against a single CPU, and reports average turnaround time, average response
time and throughput for each policy.
"""

__all__ = ["cli"]
