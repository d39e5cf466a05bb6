"""API-level routes that belong to no module."""
