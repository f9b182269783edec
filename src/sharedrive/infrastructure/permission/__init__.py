"""Permission checker adapters."""
