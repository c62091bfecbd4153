"""Runtime environments.

Settings uses the environment to pick the log renderer and to decide
whether error responses may carry stack traces.
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
