"""Run configuration for the catalog site builder."""

from .config import BuildConfig, INVALID_ID_POLICIES, PLACEHOLDER_POLICIES  # re-export

__all__ = ["BuildConfig", "INVALID_ID_POLICIES", "PLACEHOLDER_POLICIES"]
