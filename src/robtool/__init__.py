"""robtool: Newcastle–Ottawa risk‑of‑bias scoring and aggregation."""

__version__ = "0.1.0"
