"""
Shared storage, repository, response and middleware utilities.
"""
