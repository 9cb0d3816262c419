"""API layer - routing and dependencies."""
