"""Response envelope and pagination helpers shared by every resource."""

import math
from typing import Any, Dict, Optional


def envelope(data: Any = None, message: Optional[str] = None) -> Dict[str, Any]:
    """Build a success envelope, omitting empty keys."""
    body: Dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body


def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) if limit else 0


def pagination_block(page: int, limit: int, total: int, total_key: str) -> Dict[str, int]:
    """Pagination metadata for a list response.

    Args:
        page: 1-based page number that was served.
        limit: Page size.
        total: Number of records matching the filter.
        total_key: Resource specific name of the total field,
            e.g. ``total_entries`` or ``total_students``.
    """
    return {
        "current_page": page,
        "total_pages": total_pages(total, limit),
        total_key: total,
        "per_page": limit,
    }
