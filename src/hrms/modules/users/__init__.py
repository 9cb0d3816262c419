"""Users module - organisation admin accounts."""

from hrms.modules.users.models import User


__all__ = ["User"]
