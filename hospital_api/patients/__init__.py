"""
Patient management.
"""
