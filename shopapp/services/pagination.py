# shopapp/services/pagination.py
import math
from typing import List, Tuple

from sqlalchemy.orm import Query


def paginate(query: Query, page: int, limit: int) -> Tuple[List, int]:
    """Zero-based page of ``query`` plus the total number of pages."""
    page = max(page, 0)
    limit = max(limit, 1)
    total = query.order_by(None).count()
    items = query.offset(page * limit).limit(limit).all()
    return items, math.ceil(total / limit)
