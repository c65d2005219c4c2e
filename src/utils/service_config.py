"""
Service configuration settings.

All settings come from environment variables so the same code runs in Lambda,
behind uvicorn, or against a local DynamoDB.
"""
import os
import logging
from dataclasses import dataclass
from typing import Optional

DEFAULT_TABLE_NAME = "Profiles"


@dataclass(frozen=True)
class ServiceConfig:
    """Configuration for the profile registration service."""

    table_name: str = DEFAULT_TABLE_NAME
    region_name: Optional[str] = None
    dynamodb_endpoint_url: Optional[str] = None  # e.g. http://localhost:8000 for DynamoDB Local
    web_secret_key: str = "dev-secret-key"
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> 'ServiceConfig':
        """
        Create configuration from environment variables with fallback to defaults.

        Environment variables:
        - PROFILES_TABLE
        - AWS_REGION / AWS_DEFAULT_REGION
        - DYNAMODB_ENDPOINT_URL
        - WEB_SECRET_KEY
        - LOG_LEVEL
        """
        return cls(
            table_name=os.getenv('PROFILES_TABLE') or DEFAULT_TABLE_NAME,
            region_name=os.getenv('AWS_REGION') or os.getenv('AWS_DEFAULT_REGION'),
            dynamodb_endpoint_url=os.getenv('DYNAMODB_ENDPOINT_URL') or None,
            web_secret_key=os.getenv('WEB_SECRET_KEY', 'dev-secret-key'),
            log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
        )

    @property
    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level)
        return level if isinstance(level, int) else logging.INFO
