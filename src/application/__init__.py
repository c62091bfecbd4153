"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- dtos/: Result dataclasses returned by handlers
- guards/: Pre-checks run before an authentication action
- services/: Authorization helpers shared by several handlers

The application layer orchestrates domain logic but contains no business rules.
"""
