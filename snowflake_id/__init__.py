# -*- coding: utf-8 -*-
from .errors import ParseError, UnsupportedTypeError
from .utils import LogSuppress, to_unsigned, to_signed
from .snowflake import make, melt, encode, decode, extract_datetime, from_datetime
from .parser import parse_str, parse_int, normalize, unmarshal
from .models import Snowflake, Option, new, new_with_options, with_epoch, with_time, with_worker_id, \
    with_process_id, with_sequence_id
from .misc import JSONEncoder, dumps

DISCORD_EPOCH = 1420070400000
TWITTER_EPOCH = 1288834974657
