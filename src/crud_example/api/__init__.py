"""
HTTP layer: versioned routers plus the exception handlers shared by every version.
"""
