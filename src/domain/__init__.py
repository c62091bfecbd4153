"""Domain layer: entities, enums, value objects, error messages and ports.

The domain layer depends only on src.core.
"""
