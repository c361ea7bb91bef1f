"""Attribute store specific exceptions."""


class AttributeStoreError(Exception):
    """Raised when the attribute store backend cannot serve a request."""
