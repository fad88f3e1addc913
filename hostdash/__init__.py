"""
Hosting customer dashboard backend
"""
__version__ = "1.0.0"
