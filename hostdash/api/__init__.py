"""
Dashboard API package
"""
