"""
Database utilities for DynamoDB operations.

This module provides a clean interface for all database operations.
"""

# ============================================================================
# Core Infrastructure
# ============================================================================

from .base import (
    create_dynamodb_resource,
    client_error_code,

    # Decorators
    dynamodb_operation,
    monitor_performance,
)

from .helpers import (
    paginated_scan,
    utc_now,
    new_etag,
)

# ============================================================================
# Profile Operations
# ============================================================================

from .profiles import (
    ProfileStore,
    TABLE_ALREADY_EXISTS_CODE,
    TABLE_NOT_FOUND_CODE,
)

__all__ = [
    'create_dynamodb_resource',
    'client_error_code',
    'dynamodb_operation',
    'monitor_performance',
    'paginated_scan',
    'utc_now',
    'new_etag',
    'ProfileStore',
    'TABLE_ALREADY_EXISTS_CODE',
    'TABLE_NOT_FOUND_CODE',
]
