"""
Dashboard statistics.
"""
