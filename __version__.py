# ============================================================================
# VERSION - PINGCHECK
# ============================================================================
# STATUS: Foundation - Single source of version truth
# PURPOSE: Version metadata for the ping middleware
# CREATED: 19 OCT 2026
# ============================================================================
"""
Version information for pingcheck.

This is the single source of truth for the package version.
Updated manually for each release.
"""
# Version format: major.minor.patch
__version__ = "0.1.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Build metadata
BUILD_DATE = "2026-10-19"
