"""
Provisioning for the subscriptions table.
"""

from typing import Any, Dict, List

from botocore.exceptions import ClientError

from config.logger import logger
from ..config import StoreConfig
from .models import EMAIL_ATTR, NEWSLETTER_ATTR
from .subscriber_store import create_dynamodb_resource

logger = logger.getChild(__name__)

KEY_SCHEMA: List[Dict[str, str]] = [
    {'AttributeName': NEWSLETTER_ATTR, 'KeyType': 'HASH'},
    {'AttributeName': EMAIL_ATTR, 'KeyType': 'RANGE'},
]

ATTRIBUTE_DEFINITIONS: List[Dict[str, str]] = [
    {'AttributeName': NEWSLETTER_ATTR, 'AttributeType': 'S'},
    {'AttributeName': EMAIL_ATTR, 'AttributeType': 'S'},
]


def create_subscribers_table(config: StoreConfig, dynamodb: Any = None) -> Any:
    """
    Create the subscriptions table and wait until it exists.

    Args:
        config: Store configuration naming the table
        dynamodb: DynamoDB service resource; built from config if None

    Returns:
        boto3 Table resource for the new table

    Raises:
        StoreConfigurationError: If AWS configuration cannot be resolved
        botocore.exceptions.ClientError: If the table cannot be created
    """
    if dynamodb is None:
        dynamodb = create_dynamodb_resource(config)

    try:
        table = dynamodb.create_table(
            TableName=config.table_name,
            KeySchema=KEY_SCHEMA,
            AttributeDefinitions=ATTRIBUTE_DEFINITIONS,
            BillingMode='PAY_PER_REQUEST',
        )
        table.wait_until_exists()
    except ClientError as e:
        logger.error(f"Error creating table {config.table_name}: {str(e)}")
        raise

    logger.info(f"Created table {config.table_name}")
    return table
