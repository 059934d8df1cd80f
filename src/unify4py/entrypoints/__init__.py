"""Entry points (console scripts) for unify4py."""
