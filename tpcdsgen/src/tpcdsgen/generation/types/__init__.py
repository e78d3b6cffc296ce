"""Composite value types used by row generators."""
