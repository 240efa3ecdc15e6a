"""
Brain Cards Backend — Application Package Initializer
=====================================================

What: Marks the `braincards` directory as a Python package.
Why:  Enables module imports like `from braincards.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The service is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Domain Operations)   │  ← Validation, id generation
    ├─────────────────────────────────────┤
    │        Schemas (Data Contracts)     │  ← Pydantic models
    ├─────────────────────────────────────┤
    │       Category Store (Persistence)  │  ← One JSON file, rewritten whole
    └─────────────────────────────────────┘

    Routes translate Ok/Err results into responses; services never know
    about status lines or headers beyond the codes carried in Err.
"""

__version__ = "1.0.0"
