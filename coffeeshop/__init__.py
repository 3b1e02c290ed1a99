"""
Coffee Shop Catalog

Read-only HTTP catalog of coffee and tea products with configurable
per-request latency.
"""

__version__ = "1.0.0"
