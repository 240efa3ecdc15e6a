# Routes package init
"""
Brain Cards Backend — API Routes Package
=========================================

Route Inventory (prefix = settings.api_prefix, "/api" by default):
    - categories.py:  POST /api/category        (create a category)
                      GET  /api/category        (list categories, pair counts only)
                      GET  /api/category/{id}   (full category with pairs)
    - health.py:      GET  /api/health          (service and store status)

Routes stay thin: decode the request, call CategoryService, render the
Ok / Err result. Anything outside these routes gets a JSON 404 (or 405 for
a known path with another method) from the handlers in main.py.
"""
