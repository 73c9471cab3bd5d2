#!/usr/bin/env python3
"""
CLI for SiteTrack.

Usage:
    python cli.py snapshot data/export.json --today 2024-03-10
    python cli.py summary data/ --status ACTIVE --payments
    python cli.py validate data/export.json

Commands:
    snapshot  Print budget snapshots per site
    summary   Print the portfolio risk summary
    validate  Check exported records for data-quality problems
"""
from sitetrack.cli import cli


if __name__ == '__main__':
    cli()
