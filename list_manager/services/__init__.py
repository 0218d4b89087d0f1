"""Host-facing services."""
