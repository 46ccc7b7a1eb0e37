"""Command line interface for the drawer layout planner."""
