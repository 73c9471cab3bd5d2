"""
CLI Module - Command-line interface for SiteTrack.

Provides commands for:
- Site snapshots
- Portfolio summary
- Record validation
"""

from .site_commands import cli

__all__ = ['cli']
