"""hashbench — micro-benchmarks for hash-based collection types."""

__version__ = "0.1.0"
