from datetime import datetime, timezone, timedelta

# discord-style layout: 42 bits timestamp | 5 bits worker | 5 bits process | 12 bits sequence
timestamp_bits = 42
worker_id_bits = 5
process_id_bits = 5
sequence_id_bits = 12

max_timestamp = 1 << timestamp_bits
timestamp_mask = max_timestamp - 1
max_worker_id = 1 << worker_id_bits
worker_id_mask = max_worker_id - 1
max_process_id = 1 << process_id_bits
process_id_mask = max_process_id - 1
max_sequence_id = 1 << sequence_id_bits
sequence_id_mask = max_sequence_id - 1

process_id_shift = sequence_id_bits
worker_id_shift = process_id_shift + process_id_bits
timestamp_shift = worker_id_shift + worker_id_bits

unix_epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
_one_ms = timedelta(milliseconds=1)


def make(timestamp_ms: int, worker_id: int, process_id: int, sequence_id: int, epoch=0):
    """generate a snowflake id, every field is truncated to its bit width.
    :param: timestamp_ms time since UNIX epoch in milliseconds
    :param: epoch custom epoch in milliseconds, subtracted from timestamp_ms"""
    sid = ((timestamp_ms - epoch) & timestamp_mask) << timestamp_shift
    sid |= (worker_id & worker_id_mask) << worker_id_shift
    sid |= (process_id & process_id_mask) << process_id_shift
    sid |= sequence_id & sequence_id_mask

    return sid


def melt(snowflake_id: int, epoch=0):
    """inversely transform a snowflake id back to its parts."""
    sequence_id = snowflake_id & sequence_id_mask
    process_id = (snowflake_id >> process_id_shift) & process_id_mask
    worker_id = (snowflake_id >> worker_id_shift) & worker_id_mask
    timestamp_ms = (snowflake_id >> timestamp_shift) & timestamp_mask
    timestamp_ms += epoch

    return timestamp_ms, worker_id, process_id, sequence_id


def to_millis(dt: datetime) -> int:
    """milliseconds since UNIX epoch, naive datetime is treated as local time."""
    if dt.tzinfo is None:
        dt = dt.astimezone()
    return (dt - unix_epoch) // _one_ms


def utc_datetime(timestamp_ms: int) -> datetime:
    """convert millisecond timestamp to utc datetime, truncated to whole seconds."""
    return datetime.fromtimestamp(timestamp_ms // 1000, tz=timezone.utc)


def encode(timestamp: datetime, worker_id: int, process_id: int, sequence_id: int, epoch=0) -> int:
    return make(to_millis(timestamp), worker_id, process_id, sequence_id, epoch)


def decode(snowflake_id: int, epoch=0):
    timestamp_ms, worker_id, process_id, sequence_id = melt(snowflake_id, epoch)
    return utc_datetime(timestamp_ms), worker_id, process_id, sequence_id


def extract_datetime(snowflake_id: int, epoch=0):
    return decode(snowflake_id, epoch)[0]


def from_datetime(dt: datetime, epoch=0):
    """smallest id at `dt`, handy as a range bound when paging by id"""
    return make(to_millis(dt), 0, 0, 0, epoch)
