"""
System users, system logs and health reporting.
"""
