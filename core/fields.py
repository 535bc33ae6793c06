from datetime import datetime, timedelta, timezone as dt_timezone

from rest_framework import serializers

from .encoding import decode_list, encode_list

EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)


class EpochMillisecondsField(serializers.Field):
    """Datetimes on the wire are integer milliseconds since the epoch."""

    default_error_messages = {
        "invalid": "Expected a timestamp in milliseconds.",
    }

    def to_representation(self, value):
        if value.tzinfo is None:
            value = value.replace(tzinfo=dt_timezone.utc)
        return (value - EPOCH) // timedelta(milliseconds=1)

    def to_internal_value(self, data):
        if isinstance(data, bool):
            self.fail("invalid")
        try:
            millis = int(data)
        except (TypeError, ValueError):
            self.fail("invalid")
        try:
            return datetime.fromtimestamp(millis / 1000, tz=dt_timezone.utc)
        except (OverflowError, OSError, ValueError):
            self.fail("invalid")


class JSONListTextField(serializers.ListField):
    """A list on the wire, JSON text in the column."""

    def to_representation(self, value):
        return super().to_representation(decode_list(value))

    def to_internal_value(self, data):
        return encode_list(self.clean_items(super().to_internal_value(data)))

    def clean_items(self, items):
        return items


class TagListField(JSONListTextField):
    def __init__(self, **kwargs):
        kwargs.setdefault("child", serializers.CharField(allow_blank=True, max_length=100))
        super().__init__(**kwargs)

    def clean_items(self, items):
        cleaned = []
        for tag in items:
            tag = tag.strip()
            if tag and tag not in cleaned:
                cleaned.append(tag)
        return cleaned
