"""
Endpoint modules.

Each module defines an APIRouter for one entity.  The routers are
aggregated in ``api/router.py`` and then included in the main
application.
"""
