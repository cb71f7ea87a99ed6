"""
Identity bounded context - Domain layer.

Aggregates:
- User: a member of the application, identified by username
"""

from .entities.user import User, UserInfo

__all__ = ["User", "UserInfo"]
