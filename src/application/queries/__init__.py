"""Queries (CQRS read operations)."""
