"""
Infrastructure layer - adapters between external records and the domain.
"""
