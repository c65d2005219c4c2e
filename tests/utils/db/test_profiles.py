"""
Unit tests for the Profiles table store.
"""
import unittest

from botocore.exceptions import ClientError

from models.profile import Profile, ProfileRecord
from utils.db.profiles import ProfileStore
from tests.fixtures.fake_dynamodb import FakeDynamoDBResource, make_client_error


def sample_record(name: str = "John") -> ProfileRecord:
    return ProfileRecord.from_profile(
        Profile(name=name, surname="Doe", email=f"{name.lower()}@example.com", age="30")
    )


class TestEnsureTable(unittest.TestCase):
    def setUp(self):
        self.dynamodb = FakeDynamoDBResource()
        self.store = ProfileStore(self.dynamodb)

    def test_creates_table_with_profile_key_schema(self):
        self.store.ensure_table()

        self.assertIn("Profiles", self.dynamodb.tables)
        call = self.dynamodb.create_table_calls[0]
        self.assertEqual(call['TableName'], "Profiles")
        self.assertEqual(call['KeySchema'], [
            {'AttributeName': 'PartitionKey', 'KeyType': 'HASH'},
            {'AttributeName': 'RowKey', 'KeyType': 'RANGE'},
        ])
        self.assertEqual(self.dynamodb.meta.client.waiter.calls, ["Profiles"])

    def test_is_idempotent(self):
        self.store.ensure_table()
        self.store.ensure_table()

        self.assertEqual(list(self.dynamodb.tables), ["Profiles"])
        self.assertEqual(len(self.dynamodb.create_table_calls), 2)

    def test_uses_configured_table_name(self):
        store = ProfileStore(self.dynamodb, table_name="ProfilesTest")
        store.ensure_table()
        self.assertIn("ProfilesTest", self.dynamodb.tables)

    def test_other_errors_propagate(self):
        self.dynamodb.inject_error('create_table', make_client_error('AccessDeniedException', 'denied', 'CreateTable'))
        with self.assertRaises(ClientError):
            self.store.ensure_table()


class TestInsert(unittest.TestCase):
    def setUp(self):
        self.dynamodb = FakeDynamoDBResource()
        self.store = ProfileStore(self.dynamodb)
        self.store.ensure_table()

    def test_writes_one_item(self):
        record = sample_record()
        stored = self.store.insert(record)

        items = self.dynamodb.tables["Profiles"]
        self.assertEqual(len(items), 1)
        item = items[record.row_key]
        self.assertEqual(item['PartitionKey'], "Profile")
        self.assertEqual(item['Name'], "John")
        self.assertEqual(item['Timestamp'], stored.timestamp.isoformat())
        self.assertEqual(item['ETag'], stored.etag)

    def test_returns_record_with_backend_metadata(self):
        record = sample_record()
        stored = self.store.insert(record)

        self.assertEqual(stored.row_key, record.row_key)
        self.assertIsNotNone(stored.timestamp)
        self.assertTrue(stored.etag.startswith('W/"'))
        self.assertIsNone(record.timestamp)

    def test_never_overwrites_existing_row(self):
        record = sample_record()
        self.store.insert(record)

        with self.assertRaises(ClientError) as cm:
            self.store.insert(record)
        self.assertEqual(cm.exception.response['Error']['Code'], 'ConditionalCheckFailedException')

    def test_requires_row_key(self):
        record = sample_record().model_copy(update={'row_key': ''})
        with self.assertRaises(ValueError):
            self.store.insert(record)
        self.assertEqual(self.dynamodb.tables["Profiles"], {})

    def test_missing_table_propagates(self):
        self.dynamodb.drop_table("Profiles")
        with self.assertRaises(ClientError):
            self.store.insert(sample_record())


class TestScanAll(unittest.TestCase):
    def setUp(self):
        self.dynamodb = FakeDynamoDBResource(page_size=2)
        self.store = ProfileStore(self.dynamodb)

    def test_missing_table_is_empty(self):
        self.assertEqual(self.store.scan_all(), [])

    def test_returns_all_records_across_pages(self):
        self.store.ensure_table()
        names = ["Ann", "Bob", "Cid", "Dee", "Eve"]
        for name in names:
            self.store.insert(sample_record(name))

        records = self.store.scan_all()

        self.assertEqual(sorted(r.profile.name for r in records), names)
        self.assertEqual(self.dynamodb.Table("Profiles").scan_calls, 3)
        self.assertTrue(all(r.partition_key == "Profile" for r in records))

    def test_other_errors_propagate(self):
        self.store.ensure_table()
        self.dynamodb.inject_error('scan', make_client_error('ProvisionedThroughputExceededException', 'slow down', 'Scan'))
        with self.assertRaises(ClientError):
            self.store.scan_all()


if __name__ == '__main__':
    unittest.main()
