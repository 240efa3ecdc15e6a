"""
Brain Cards Backend — Pydantic Data Contracts
==============================================

What:  Pydantic models for categories as stored on disk and returned by the API.
Why:   One definition drives JSON (de)serialization of the store file and of
       every response body, so the two can never drift apart.
Who:   Used by the category store (file format), the category service
       (domain values) and the route handlers (response bodies).

Wire shapes:
    Category          {"id": "bc...", "title": "Animals", "pairs": [["cat", "meow"]]}
    CategoryListItem  {"id": "bc...", "title": "Animals", "length": 1}
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Domain Models — what lives in the store file
# ══════════════════════════════════════════════════════════════════════════


class Category(BaseModel):
    """
    What:  A titled, ordered list of (word, definition) pairs.
    Who:   Persisted as one element of the store's JSON array; returned in
           full by POST /category and GET /category/{id}.

    The id is assigned once at creation and never changes. Pair order is the
    order the client sent them in.
    """
    id: str = Field(description="Opaque identifier, 'bc' + 10 base-36 characters")
    title: str = Field(description="Category label")
    pairs: List[Tuple[str, str]] = Field(
        default_factory=list,
        description="Ordered (word, definition) pairs",
    )

    # Keys written by other tools survive a read and are returned by GET
    model_config = {"extra": "allow"}


class CategoryListItem(BaseModel):
    """
    What:  Compact category representation for the list endpoint.
    Why:   The list view only needs a count; pair contents stay out of the payload.
    """
    id: str = Field(description="Category identifier")
    title: str = Field(description="Category label")
    length: int = Field(description="Number of pairs in the category")

    @classmethod
    def from_category(cls, category: Category) -> "CategoryListItem":
        return cls(id=category.id, title=category.title, length=len(category.pairs))


# ══════════════════════════════════════════════════════════════════════════
# Response Models — documentation of the non-category bodies
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """
    What:  Body of every error response.

    Example:
        {"message": "title is required"}
    """
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check body: service status plus store reachability."""
    status: str = Field(description="healthy or unhealthy")
    version: str = Field(description="Application version")
    store: str = Field(description="available or unavailable")
    uptime_seconds: float = Field(description="Seconds since service started")
    detail: Optional[str] = Field(default=None, description="Store location checked")
