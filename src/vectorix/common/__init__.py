"""
Shared infrastructure: configuration and logging.
"""
