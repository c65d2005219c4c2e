"""
Helper functions for database operations.

This module provides:
- Pagination helpers
- Timestamp and version-marker helpers
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List, Dict, Any, Optional, Tuple, Callable, TypeVar

logger = logging.getLogger(__name__)

# Type variable for generic functions
T = TypeVar('T')


# ============================================================================
# Pagination Helper
# ============================================================================

def paginated_scan(
    table: Any,
    scan_params: Optional[Dict[str, Any]] = None,
    max_items: Optional[int] = None,
    transform: Optional[Callable[[Dict], T]] = None
) -> Tuple[List[T], Optional[Dict[str, Any]]]:
    """
    Execute paginated DynamoDB scan and return all items.

    Args:
        table: DynamoDB table resource
        scan_params: Scan parameters (FilterExpression, etc.)
        max_items: Maximum items to return (None for all)
        transform: Optional function to transform each item

    Returns:
        Tuple of (items, last_evaluated_key)

    Example:
        records, _ = paginated_scan(
            table=table,
            transform=ProfileRecord.from_dynamodb_item
        )
    """
    items: List[T] = []
    items_collected = 0
    current_params = dict(scan_params or {})
    last_evaluated_key = None

    while True:
        response = table.scan(**current_params)
        batch = response.get('Items', [])

        if transform:
            batch = [transform(item) for item in batch]

        items.extend(batch)
        items_collected += len(batch)

        if max_items and items_collected >= max_items:
            items = items[:max_items]
            last_evaluated_key = response.get('LastEvaluatedKey')
            break

        last_evaluated_key = response.get('LastEvaluatedKey')
        if not last_evaluated_key:
            break

        current_params['ExclusiveStartKey'] = last_evaluated_key

    logger.debug(f"Paginated scan returned {len(items)} items")
    return items, last_evaluated_key


# ============================================================================
# Timestamp Helpers
# ============================================================================

def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_etag(written_at: datetime) -> str:
    """
    Build an opaque concurrency tag for a freshly written item.

    Format: W/"datetime'<iso timestamp>'-<random hex>"
    """
    return f'W/"datetime\'{written_at.isoformat()}\'-{uuid.uuid4().hex[:8]}"'
