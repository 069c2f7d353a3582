"""
Sale endpoints and persistence.
"""
