"""
Core utilities: logging setup and text helpers.
"""
