"""Commands (CQRS write operations)."""
