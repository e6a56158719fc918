"""
Mailing list package for the newsletter subscriber store.
Contains the DynamoDB-backed subscriber store and its record model.
"""

from .exceptions import (
    MailingListError,
    StoreConfigurationError,
    SubscriptionDecodeError,
    SubscriptionEncodeError,
)
from .models import Clock, Subscription, utc_now
from .subscriber_store import SubscriberStore
from .table import create_subscribers_table

__all__ = [
    'SubscriberStore',
    'Subscription',
    'Clock',
    'utc_now',
    'create_subscribers_table',
    'MailingListError',
    'StoreConfigurationError',
    'SubscriptionEncodeError',
    'SubscriptionDecodeError',
]
