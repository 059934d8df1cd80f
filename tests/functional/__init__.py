"""Functional tests for the ``unify`` command as a user sees it."""
