# Services package init
"""
Brain Cards Backend — Services Layer
=====================================

What:  Domain operations and the persistence they sit on.

Service Inventory:
    - CategoryStore (abstract): load / save / ensure_exists over the whole collection
    - JsonFileStore: CategoryStore backed by one JSON file (aiofiles I/O)
    - CategoryService: create / list / get-by-id, returning Ok / Err results

Routes depend on CategoryService through get_category_service(), so tests
and alternative deployments can hand it a different store.
"""
