"""
Doctor management.
"""
