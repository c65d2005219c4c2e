import logging
import os
import unittest
from unittest.mock import patch

from utils.service_config import ServiceConfig


class TestServiceConfig(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        config = ServiceConfig.from_environment()
        self.assertEqual(config.table_name, "Profiles")
        self.assertIsNone(config.region_name)
        self.assertIsNone(config.dynamodb_endpoint_url)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.numeric_log_level, logging.INFO)

    @patch.dict(os.environ, {
        'PROFILES_TABLE': 'ProfilesTest',
        'AWS_DEFAULT_REGION': 'eu-west-2',
        'DYNAMODB_ENDPOINT_URL': 'http://localhost:8000',
        'WEB_SECRET_KEY': 'secret',
        'LOG_LEVEL': 'debug',
    }, clear=True)
    def test_from_environment(self):
        config = ServiceConfig.from_environment()
        self.assertEqual(config.table_name, 'ProfilesTest')
        self.assertEqual(config.region_name, 'eu-west-2')
        self.assertEqual(config.dynamodb_endpoint_url, 'http://localhost:8000')
        self.assertEqual(config.web_secret_key, 'secret')
        self.assertEqual(config.numeric_log_level, logging.DEBUG)

    @patch.dict(os.environ, {'AWS_REGION': 'us-east-1', 'AWS_DEFAULT_REGION': 'eu-west-2'}, clear=True)
    def test_aws_region_takes_precedence(self):
        self.assertEqual(ServiceConfig.from_environment().region_name, 'us-east-1')

    def test_unknown_log_level_falls_back_to_info(self):
        self.assertEqual(ServiceConfig(log_level='CHATTY').numeric_log_level, logging.INFO)


if __name__ == '__main__':
    unittest.main()
