"""Repositories wrapping database access."""
