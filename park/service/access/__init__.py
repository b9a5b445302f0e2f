"""
Access functions for the records that have no lifecycle of their own.
"""
