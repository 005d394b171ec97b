"""Benchmarking subsystem for hashbench.

Provides a timed-trial runner that measures individual collection
operations with a monotonic nanosecond clock, accumulates the samples
per operation across repeated runs, and reduces them to exact integer
statistics.
"""
