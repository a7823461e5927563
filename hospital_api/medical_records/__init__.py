"""
Medical record filing.
"""
