"""
Profile table operations.

The Profiles table keys every item on PartitionKey (always "Profile") and
RowKey (a UUID string). Items are only ever inserted and scanned.
"""

import logging
from typing import Any, List, Optional

from botocore.exceptions import ClientError

from models.profile import ProfileRecord
from utils.service_config import DEFAULT_TABLE_NAME
from utils.db.base import (
    client_error_code,
    dynamodb_operation,
    monitor_performance,
)
from utils.db.helpers import paginated_scan, utc_now, new_etag

logger = logging.getLogger(__name__)

TABLE_ALREADY_EXISTS_CODE = 'ResourceInUseException'
TABLE_NOT_FOUND_CODE = 'ResourceNotFoundException'


class ProfileStore:
    """
    Data access for the Profiles table.

    One instance wraps one long-lived DynamoDB resource. boto3 resources are
    only read after construction, so a store may be shared by concurrent
    requests.
    """

    def __init__(self, dynamodb: Any, table_name: str = DEFAULT_TABLE_NAME):
        self._dynamodb = dynamodb
        self.table_name = table_name
        self.table = dynamodb.Table(table_name)

    @monitor_performance(operation_type="create_table", warn_threshold_ms=2000, error_threshold_ms=20000)
    @dynamodb_operation("ensure_profiles_table")
    def ensure_table(self) -> None:
        """Create the table if it does not exist yet and wait until it is usable."""
        try:
            self._dynamodb.create_table(
                TableName=self.table_name,
                KeySchema=[
                    {'AttributeName': 'PartitionKey', 'KeyType': 'HASH'},
                    {'AttributeName': 'RowKey', 'KeyType': 'RANGE'},
                ],
                AttributeDefinitions=[
                    {'AttributeName': 'PartitionKey', 'AttributeType': 'S'},
                    {'AttributeName': 'RowKey', 'AttributeType': 'S'},
                ],
                BillingMode='PAY_PER_REQUEST',
            )
            logger.info(f"Created table {self.table_name}")
        except ClientError as e:
            if client_error_code(e) != TABLE_ALREADY_EXISTS_CODE:
                raise
            logger.debug(f"Table {self.table_name} already exists")

        waiter = self._dynamodb.meta.client.get_waiter('table_exists')
        waiter.wait(TableName=self.table_name)

    @monitor_performance(operation_type="put_item", warn_threshold_ms=500)
    @dynamodb_operation("insert_profile")
    def insert(self, record: ProfileRecord) -> ProfileRecord:
        """
        Write one new record.

        The caller owns the row key. The write is conditional on the row key
        being unused so an existing item is never overwritten.

        Returns:
            The record carrying the timestamp and etag written with it.
        """
        if not record.row_key:
            raise ValueError("Row key must be set before inserting a profile record")

        written_at = utc_now()
        stored = record.with_backend_metadata(written_at, new_etag(written_at))
        self.table.put_item(
            Item=stored.to_dynamodb_item(),
            ConditionExpression='attribute_not_exists(RowKey)',
        )
        logger.info(f"Inserted profile with RowKey: {stored.row_key}")
        return stored

    @monitor_performance(operation_type="scan", warn_threshold_ms=1000)
    @dynamodb_operation("scan_profiles")
    def scan_all(self, max_items: Optional[int] = None) -> List[ProfileRecord]:
        """
        Return every record in the table in backend order.

        A table that does not exist yet holds zero records.
        """
        try:
            records, _ = paginated_scan(
                table=self.table,
                max_items=max_items,
                transform=ProfileRecord.from_dynamodb_item,
            )
        except ClientError as e:
            if client_error_code(e) != TABLE_NOT_FOUND_CODE:
                raise
            logger.warning(f"{self.table_name} table does not exist yet")
            return []
        logger.info(f"Retrieved {len(records)} profiles from {self.table_name}")
        return records
