from datetime import datetime, timezone


def utcnow() -> datetime:
    # BSON dates keep millisecond precision; trim so a fresh document
    # renders the same as one read back from the store
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def render_date(value):
    if isinstance(value, datetime):
        if value.tzinfo is None:
            # pymongo hands back naive UTC datetimes
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    return value


def copy_optional(src: dict, dst: dict, fields) -> dict:
    # absent stays absent; explicit None / "" is kept as given
    for k in fields:
        if k in src:
            dst[k] = src[k]
    return dst
