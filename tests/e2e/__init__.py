"""End-to-end tests driving the full ``unify`` command."""
