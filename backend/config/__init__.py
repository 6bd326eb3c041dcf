"""
Configuration package.

Environment-driven runtime settings live in app_config.
"""
