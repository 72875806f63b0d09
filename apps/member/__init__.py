"""Member Identity Service."""
