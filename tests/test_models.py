import sys
from datetime import datetime, timezone, timedelta
import pytest
from snowflake_id import Snowflake, new, new_with_options, with_epoch, with_time, with_worker_id, \
    with_process_id, with_sequence_id, DISCORD_EPOCH
from snowflake_id.snowflake import make, unix_epoch

NEW_YEAR = datetime(2020, 1, 1, tzinfo=timezone.utc)
NEW_YEAR_ID = 6617927201587339267  # worker 1, process 2, sequence 3


def test_new():
    before = datetime.now(timezone.utc)
    sf = new()
    after = datetime.now(timezone.utc)
    assert sf.epoch == 0
    assert sf.worker_id == 0
    assert sf.process_id == 0
    assert sf.sequence_id == 0
    assert before <= sf.timestamp <= after


def test_new_with_options():
    sf = new_with_options(with_epoch(12345), with_time(NEW_YEAR), with_worker_id(7), with_process_id(8),
                          with_sequence_id(9))
    assert sf.epoch == 12345
    assert sf.timestamp == NEW_YEAR
    assert (sf.worker_id, sf.process_id, sf.sequence_id) == (7, 8, 9)


def test_new_with_no_options():
    sf = new_with_options()
    assert (sf.epoch, sf.worker_id, sf.process_id, sf.sequence_id) == (0, 0, 0, 0)


def test_option_precedence():
    assert new_with_options(with_worker_id(1), with_worker_id(2)).worker_id == 2
    assert new_with_options(with_epoch(1), with_sequence_id(5), with_epoch(2)).epoch == 2


def test_accessors():
    sf = new_with_options(with_time(NEW_YEAR), with_worker_id(1), with_process_id(2), with_sequence_id(3))
    assert sf.to_uint64() == NEW_YEAR_ID
    assert sf.to_int64() == NEW_YEAR_ID
    assert int(sf) == NEW_YEAR_ID
    assert str(sf) == '6617927201587339267'


@pytest.mark.skipif(sys.maxsize < 1 << 62, reason='64-bit platform only')
def test_native_accessors():
    sf = new_with_options(with_time(NEW_YEAR), with_worker_id(1), with_process_id(2), with_sequence_id(3))
    assert sf.to_int() == NEW_YEAR_ID
    assert sf.to_uint() == NEW_YEAR_ID


def test_high_bit_accessors():
    sf = new_with_options(with_time(unix_epoch + timedelta(milliseconds=1 << 41)))
    raw = 1 << 63
    assert sf.to_uint64() == raw
    assert int(sf) == raw
    assert sf.to_int64() == raw - (1 << 64)
    if sys.maxsize > 1 << 62:
        assert sf.to_int() == raw - (1 << 64)
        assert sf.to_uint() == raw


def test_encode_masks_fields():
    sf = new_with_options(with_time(NEW_YEAR), with_worker_id(32), with_process_id(33), with_sequence_id(4096))
    assert int(sf) == make(1577836800000, 0, 1, 0)


def test_epoch_is_subtracted():
    sf = new_with_options(with_epoch(DISCORD_EPOCH), with_time(NEW_YEAR))
    assert int(sf) == (1577836800000 - DISCORD_EPOCH) << 22


@pytest.mark.parametrize('worker_id, process_id, sequence_id', [(0, 0, 0), (31, 31, 4095), (5, 17, 1024)])
def test_round_trip(worker_id, process_id, sequence_id):
    dt = datetime(2023, 3, 4, 5, 6, 7, 891000, tzinfo=timezone.utc)
    sf = new_with_options(with_epoch(DISCORD_EPOCH), with_time(dt), with_worker_id(worker_id),
                          with_process_id(process_id), with_sequence_id(sequence_id))
    parsed = Snowflake.parse(str(sf), DISCORD_EPOCH)
    assert parsed.timestamp == dt.replace(microsecond=0)
    assert (parsed.worker_id, parsed.process_id, parsed.sequence_id) == (worker_id, process_id, sequence_id)
    assert parsed.epoch == DISCORD_EPOCH


def test_sub_second_is_lost():
    parsed = Snowflake.parse(175928847299117063, DISCORD_EPOCH)
    assert int(parsed) == make(1462015105000, 1, 0, 7, DISCORD_EPOCH)
    assert int(parsed) != 175928847299117063


def test_naive_time():
    naive = datetime(2020, 1, 1)
    sf = new_with_options(with_time(naive))
    assert int(sf) >> 22 == int(naive.timestamp()) * 1000
