"""The ``unify`` command-line interface."""
