"""
Infrastructure Layer
Concrete repository implementations.
"""
