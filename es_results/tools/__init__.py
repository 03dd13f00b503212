"""
Search execution and summary tools.
"""
