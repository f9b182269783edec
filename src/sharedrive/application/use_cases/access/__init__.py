"""Access check use cases."""
