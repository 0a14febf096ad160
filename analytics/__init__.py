"""
Analytics package for cross-trip aggregations.

The package is organized into:
- services/: Reductions over collections of already-loaded trips
"""
