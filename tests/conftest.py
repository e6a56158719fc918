"""Shared fixtures for the mailing list store tests."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Tuple

import pytest
from botocore.exceptions import ClientError

from src.mailing_list import SubscriberStore


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table keyed by (newsletter, email)."""

    def __init__(self, name: str = 'test-subscribers'):
        self.name = name
        self._items: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def put_item(self, Item):
        self.calls.append(('put_item', {'Item': Item}))
        self._items[(Item['newsletter'], Item['email'])] = dict(Item)
        return {}

    def delete_item(self, Key):
        self.calls.append(('delete_item', {'Key': Key}))
        self._items.pop((Key['newsletter'], Key['email']), None)
        return {}

    def query(self, KeyConditionExpression):
        self.calls.append(('query', {'KeyConditionExpression': KeyConditionExpression}))
        expression = KeyConditionExpression.get_expression()
        assert expression['operator'] == '='
        key, value = expression['values']
        items = [dict(item) for item in self._items.values() if item.get(key.name) == value]
        return {'Items': items, 'Count': len(items)}

    def items(self) -> List[Dict[str, Any]]:
        return list(self._items.values())


class FailingTable(FakeTable):
    """Table whose every request fails with the given error."""

    def __init__(self, error: Exception, name: str = 'test-subscribers'):
        super().__init__(name)
        self.error = error

    def put_item(self, Item):
        raise self.error

    def delete_item(self, Key):
        raise self.error

    def query(self, KeyConditionExpression):
        raise self.error


class SteppingClock:
    """Clock that advances one second on every call."""

    def __init__(self, start: datetime):
        self.current = start

    def __call__(self) -> datetime:
        now = self.current
        self.current = now + timedelta(seconds=1)
        return now


def make_client_error(operation: str, code: str = 'ProvisionedThroughputExceededException') -> ClientError:
    return ClientError({'Error': {'Code': code, 'Message': 'simulated failure'}}, operation)


@pytest.fixture
def start_time() -> datetime:
    return datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock(start_time) -> SteppingClock:
    return SteppingClock(start_time)


@pytest.fixture
def table() -> FakeTable:
    return FakeTable()


@pytest.fixture
def store(table, clock) -> SubscriberStore:
    return SubscriberStore(table, clock=clock)
