"""Core record model, store and query engine."""
