from datetime import datetime, timedelta, timezone

import pytest

from src.mailing_list import Subscription, SubscriptionDecodeError, SubscriptionEncodeError, utc_now


class TestSubscriptionEncoding:
    def test_to_item_uses_contract_field_names(self, start_time):
        item = Subscription('digest', 'a@x.com', start_time).to_item()

        assert item == {
            'newsletter': 'digest',
            'email': 'a@x.com',
            'created_at': '2024-03-01T09:30:00+00:00',
        }

    def test_naive_timestamp_is_treated_as_utc(self):
        item = Subscription('digest', 'a@x.com', datetime(2024, 3, 1, 9, 30)).to_item()

        assert item['created_at'] == '2024-03-01T09:30:00+00:00'

    def test_empty_strings_are_accepted(self, start_time):
        item = Subscription('', '', start_time).to_item()

        assert item['newsletter'] == ''
        assert item['email'] == ''

    def test_non_string_email_fails_to_encode(self, start_time):
        with pytest.raises(SubscriptionEncodeError):
            Subscription('digest', 42, start_time).to_item()

    def test_non_datetime_timestamp_fails_to_encode(self):
        with pytest.raises(SubscriptionEncodeError):
            Subscription('digest', 'a@x.com', '2024-03-01').to_item()


class TestSubscriptionDecoding:
    def test_from_item_reads_encoded_item(self, start_time):
        original = Subscription('digest', 'a@x.com', start_time)

        assert Subscription.from_item(original.to_item()) == original

    def test_from_item_accepts_trailing_z(self):
        subscription = Subscription.from_item({
            'newsletter': 'digest',
            'email': 'a@x.com',
            'created_at': '2019-05-04T12:00:00Z',
        })

        assert subscription.created_at == datetime(2019, 5, 4, 12, 0, tzinfo=timezone.utc)

    def test_missing_attribute_fails_to_decode(self):
        with pytest.raises(SubscriptionDecodeError, match='created_at'):
            Subscription.from_item({'newsletter': 'digest', 'email': 'a@x.com'})

    def test_bad_timestamp_fails_to_decode(self):
        with pytest.raises(SubscriptionDecodeError):
            Subscription.from_item({
                'newsletter': 'digest',
                'email': 'a@x.com',
                'created_at': 'yesterday',
            })

    def test_non_string_email_fails_to_decode(self):
        with pytest.raises(SubscriptionDecodeError):
            Subscription.from_item({
                'newsletter': 'digest',
                'email': 7,
                'created_at': '2024-03-01T09:30:00+00:00',
            })


def test_utc_now_is_timezone_aware():
    now = utc_now()

    assert now.utcoffset() == timedelta(0)


class TestTimestampPrecision:
    def test_nanosecond_fraction_with_offset_decodes(self):
        subscription = Subscription.from_item({
            'newsletter': 'digest',
            'email': 'a@x.com',
            'created_at': '2019-05-04T12:00:00.123456789+08:00',
        })

        assert subscription.created_at == datetime(
            2019, 5, 4, 4, 0, 0, 123456, tzinfo=timezone.utc
        )

    def test_trimmed_four_digit_fraction_decodes(self):
        subscription = Subscription.from_item({
            'newsletter': 'digest',
            'email': 'a@x.com',
            'created_at': '2019-05-04T12:00:00.1234Z',
        })

        assert subscription.created_at == datetime(
            2019, 5, 4, 12, 0, 0, 123400, tzinfo=timezone.utc
        )
