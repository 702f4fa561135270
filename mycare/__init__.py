"""
MyCare client core: authentication session and order management
"""

__version__ = "1.0.0"
