"""
Deterministic AI stub endpoints.
"""
