"""
Data-access layer for a blog: pages, posts, tags, users and comments stored in a
relational database through SQLAlchemy.
"""

__version__ = "0.1.0"
