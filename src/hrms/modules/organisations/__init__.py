"""Organisations module - tenant root records."""

from hrms.modules.organisations.models import Organisation


__all__ = ["Organisation"]
