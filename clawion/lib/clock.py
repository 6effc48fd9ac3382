from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_local(moment: datetime | None = None) -> str:
    """Local wall-clock time as YYYY-MM-DD HH:MM:SS.

    Stored timestamps sort correctly as plain strings in this format.
    """
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


def now_local() -> str:
    return format_local()
