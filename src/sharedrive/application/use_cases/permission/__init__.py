"""Grant management use cases."""
