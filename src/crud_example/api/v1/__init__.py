"""
Version 1 of the API.

Breaking changes go into a new version subpackage (``v2``) so existing clients keep working.
"""
