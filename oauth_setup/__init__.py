"""
OAuth credential setup and access-token lifecycle for a local Claude profile.
"""

__version__ = "0.1.0"
