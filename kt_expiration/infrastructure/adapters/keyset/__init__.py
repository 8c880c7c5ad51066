"""Keyset metadata adapters."""

from .tink_json import TinkJsonKeysetResolver

__all__ = ["TinkJsonKeysetResolver"]
