"""
Module for storing newsletter subscribers in DynamoDB.
"""

from typing import Any, List, Optional

import boto3
from boto3.dynamodb.conditions import Key
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, ProfileNotFound

from config.logger import logger
from ..config import StoreConfig
from .exceptions import StoreConfigurationError, SubscriptionDecodeError, SubscriptionEncodeError
from .models import EMAIL_ATTR, NEWSLETTER_ATTR, Clock, Subscription, utc_now


def create_session(config: StoreConfig) -> boto3.session.Session:
    """
    Build a boto3 session and make sure credentials resolve.

    Args:
        config: Store configuration

    Returns:
        boto3 Session bound to the configured profile and region

    Raises:
        StoreConfigurationError: If the profile, region or credentials cannot be resolved
    """
    try:
        session = boto3.session.Session(
            profile_name=config.profile_name,
            region_name=config.region_name,
        )
        credentials = session.get_credentials()
    except ProfileNotFound as e:
        raise StoreConfigurationError(f"AWS profile not found: {config.profile_name}") from e
    except BotoCoreError as e:
        raise StoreConfigurationError(f"Error resolving AWS configuration: {str(e)}") from e

    if credentials is None:
        raise StoreConfigurationError("No AWS credentials could be resolved")

    if session.region_name is None and config.endpoint_url is None:
        raise StoreConfigurationError("No AWS region configured")

    return session


def create_dynamodb_resource(config: StoreConfig) -> Any:
    """Create a DynamoDB service resource for the given configuration."""
    session = create_session(config)
    client_config = Config(
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
    )
    try:
        return session.resource(
            'dynamodb',
            endpoint_url=config.endpoint_url,
            config=client_config,
        )
    except BotoCoreError as e:
        raise StoreConfigurationError(f"Error creating DynamoDB resource: {str(e)}") from e


class SubscriberStore:
    """
    DynamoDB-backed store for newsletter subscriptions.

    Each record is keyed by newsletter (partition key) and email (sort key).
    Every operation is a single request against the table; errors from the
    storage client are logged and re-raised unchanged.
    """

    def __init__(self, table: Any, clock: Optional[Clock] = None):
        """
        Initialize the subscriber store.

        Args:
            table: boto3 DynamoDB Table resource (or anything with the same
                   put_item, delete_item and query methods)
            clock: Callable returning the current time; defaults to UTC now
        """
        self._table = table
        self._clock = clock or utc_now
        self.logger = logger.getChild(self.__class__.__name__)

    @classmethod
    def from_config(cls, config: StoreConfig, clock: Optional[Clock] = None) -> 'SubscriberStore':
        """
        Create a store bound to the table named in the configuration.

        Args:
            config: Store configuration
            clock: Optional clock override

        Returns:
            SubscriberStore instance

        Raises:
            StoreConfigurationError: If AWS configuration cannot be resolved
        """
        dynamodb = create_dynamodb_resource(config)
        table = dynamodb.Table(config.table_name)
        return cls(table, clock=clock)

    @property
    def table(self) -> Any:
        return self._table

    @property
    def table_name(self) -> str:
        return self._table.name

    def add_subscriber(self, newsletter: str, email: str) -> None:
        """
        Add a subscriber to a newsletter, replacing any existing record for the pair.

        Args:
            newsletter: Newsletter name
            email: Subscriber's email address

        Raises:
            SubscriptionEncodeError: If the record cannot be encoded
            botocore.exceptions.ClientError: If the write fails
        """
        subscription = Subscription(newsletter=newsletter, email=email, created_at=self._clock())

        try:
            item = subscription.to_item()
            self._table.put_item(Item=item)
        except (SubscriptionEncodeError, ClientError, BotoCoreError) as e:
            self.logger.error(f"Error adding subscriber {email} to {newsletter}: {str(e)}")
            raise

        self.logger.info(f"Added subscriber {email} to {newsletter}")

    def remove_subscriber(self, newsletter: str, email: str) -> None:
        """
        Remove a subscriber from a newsletter.

        Removing a subscriber that does not exist succeeds.

        Args:
            newsletter: Newsletter name
            email: Subscriber's email address

        Raises:
            botocore.exceptions.ClientError: If the delete fails
        """
        try:
            self._table.delete_item(Key={NEWSLETTER_ATTR: newsletter, EMAIL_ATTR: email})
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"Error removing subscriber {email} from {newsletter}: {str(e)}")
            raise

        self.logger.info(f"Removed subscriber {email} from {newsletter}")

    def get_subscribers(self, newsletter: str) -> List[str]:
        """
        Get subscriber emails for a newsletter.

        Only the first page of query results is read. Order is whatever the
        table returns.

        Args:
            newsletter: Newsletter name

        Returns:
            List of email addresses; empty if the newsletter has no subscribers

        Raises:
            SubscriptionDecodeError: If a returned item is malformed
            botocore.exceptions.ClientError: If the query fails
        """
        try:
            response = self._table.query(
                KeyConditionExpression=Key(NEWSLETTER_ATTR).eq(newsletter)
            )
            subscriptions = [Subscription.from_item(item) for item in response.get('Items', [])]
        except (SubscriptionDecodeError, ClientError, BotoCoreError) as e:
            self.logger.error(f"Error getting subscribers for {newsletter}: {str(e)}")
            raise

        self.logger.info(f"Found {len(subscriptions)} subscribers for {newsletter}")
        return [s.email for s in subscriptions]
