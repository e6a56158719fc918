"""
Configuration module for the newsletter mailing list store.
Loads environment variables from .env file and provides access to configuration settings.
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# DynamoDB Configuration
SUBSCRIBERS_TABLE_NAME = os.getenv('SUBSCRIBERS_TABLE_NAME', 'newsletter-subscribers')
AWS_REGION = os.getenv('AWS_REGION') or os.getenv('AWS_DEFAULT_REGION')
AWS_PROFILE = os.getenv('AWS_PROFILE')
DYNAMODB_ENDPOINT_URL = os.getenv('DYNAMODB_ENDPOINT_URL')

# Client timeouts in seconds
DYNAMODB_CONNECT_TIMEOUT = float(os.getenv('DYNAMODB_CONNECT_TIMEOUT', '5'))
DYNAMODB_READ_TIMEOUT = float(os.getenv('DYNAMODB_READ_TIMEOUT', '10'))


@dataclass(frozen=True)
class StoreConfig:
    """
    Settings needed to bind a subscriber store to its DynamoDB table.

    Attributes:
        table_name: Name of the subscriptions table
        region_name: AWS region; None defers to the ambient AWS configuration
        profile_name: Named AWS profile; None uses the default credential chain
        endpoint_url: Override endpoint, e.g. for DynamoDB Local
        connect_timeout: Socket connect timeout in seconds
        read_timeout: Socket read timeout in seconds
    """

    table_name: str
    region_name: Optional[str] = None
    profile_name: Optional[str] = None
    endpoint_url: Optional[str] = None
    connect_timeout: float = 5.0
    read_timeout: float = 10.0

    @classmethod
    def from_env(cls, table_name: Optional[str] = None) -> 'StoreConfig':
        """
        Build a config from the environment settings above.

        Args:
            table_name: Overrides SUBSCRIBERS_TABLE_NAME when given

        Returns:
            StoreConfig instance
        """
        return cls(
            table_name=table_name or SUBSCRIBERS_TABLE_NAME,
            region_name=AWS_REGION,
            profile_name=AWS_PROFILE,
            endpoint_url=DYNAMODB_ENDPOINT_URL,
            connect_timeout=DYNAMODB_CONNECT_TIMEOUT,
            read_timeout=DYNAMODB_READ_TIMEOUT,
        )
