"""Infrastructure layer - adapters for the domain ports.

Structure:
- persistence/: SQLAlchemy models, Database and repositories
- security/: bcrypt, JWT and one-time code services
- email/: outbound email adapters
- logging/: structlog adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
