"""
Endpoint modules for API v1, one APIRouter per resource.

The routers are aggregated in ``router.py`` and included by ``create_app()``.
"""
