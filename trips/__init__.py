"""
Trip records and per-trip statistics.

The package is organized into:
- models.py: Pydantic records supplied by the persistence layer
- experience.py: The ordered ride experience scale
- services/: Derived trip metrics
- serializers.py: Slugs, summaries and JSON payloads
"""
