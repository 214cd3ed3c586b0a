"""
Endpoint subpackage.

Each module defines an APIRouter for one service.  The routers are
aggregated in ``router.py`` at the package level and then included in
the matching application.
"""
