"""
Product catalog endpoints and persistence.
"""
