"""
Subscription record model and its table item encoding.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Mapping

from dateutil.parser import isoparse

from .exceptions import SubscriptionDecodeError, SubscriptionEncodeError

# Attribute names shared with existing tables
NEWSLETTER_ATTR = 'newsletter'
EMAIL_ATTR = 'email'
CREATED_AT_ATTR = 'created_at'

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Default clock: the current time in UTC."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Subscription:
    """
    A single email address subscribed to a newsletter.

    (newsletter, email) identifies the record; created_at is set once when
    the record is written.
    """

    newsletter: str
    email: str
    created_at: datetime

    def to_item(self) -> Dict[str, Any]:
        """
        Encode the subscription as a DynamoDB item.

        Returns:
            Attribute map with newsletter, email and an ISO-8601 created_at

        Raises:
            SubscriptionEncodeError: If a field has the wrong type
        """
        if not isinstance(self.newsletter, str) or not isinstance(self.email, str):
            raise SubscriptionEncodeError(
                f"newsletter and email must be strings, got "
                f"{type(self.newsletter).__name__} and {type(self.email).__name__}"
            )
        if not isinstance(self.created_at, datetime):
            raise SubscriptionEncodeError(
                f"created_at must be a datetime, got {type(self.created_at).__name__}"
            )

        created_at = self.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)

        return {
            NEWSLETTER_ATTR: self.newsletter,
            EMAIL_ATTR: self.email,
            CREATED_AT_ATTR: created_at.isoformat(),
        }

    @classmethod
    def from_item(cls, item: Mapping[str, Any]) -> 'Subscription':
        """
        Decode a DynamoDB item into a subscription.

        Args:
            item: Attribute map as returned by a table query

        Returns:
            Subscription instance

        Raises:
            SubscriptionDecodeError: If an attribute is missing or malformed
        """
        try:
            newsletter = item[NEWSLETTER_ATTR]
            email = item[EMAIL_ATTR]
            raw_created_at = item[CREATED_AT_ATTR]
        except KeyError as e:
            raise SubscriptionDecodeError(f"Item is missing attribute {e}") from e

        if not isinstance(newsletter, str) or not isinstance(email, str):
            raise SubscriptionDecodeError(f"Item has non-string key attributes: {dict(item)}")

        try:
            # Sub-microsecond digits are truncated
            created_at = isoparse(str(raw_created_at))
        except ValueError as e:
            raise SubscriptionDecodeError(f"Invalid created_at value: {raw_created_at!r}") from e

        return cls(newsletter=newsletter, email=email, created_at=created_at)
