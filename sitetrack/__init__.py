"""
SiteTrack - construction site budget tracking and risk metrics.
"""

__version__ = "1.0.0"
