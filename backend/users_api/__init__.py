"""
Users API
Owner-only user lookups behind JWT authentication
"""

__version__ = "1.0.0"
