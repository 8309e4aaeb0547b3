# -*- coding: utf-8 -*-
from __future__ import annotations
import ctypes
import logging
import re
from typing import TYPE_CHECKING, Union
from . import snowflake
from .errors import ParseError, UnsupportedTypeError
from .utils import to_unsigned

if TYPE_CHECKING:
    from .models import Snowflake

UINT64_MAX = (1 << 64) - 1
INT64_MIN = -(1 << 63)

# fixed width integers, the native `c_int`/`c_uint`/`c_long`/`c_ulong` are aliases of some of these
CTYPES_INTEGERS = (
    ctypes.c_int8, ctypes.c_int16, ctypes.c_int32, ctypes.c_int64,
    ctypes.c_uint8, ctypes.c_uint16, ctypes.c_uint32, ctypes.c_uint64,
    ctypes.c_int, ctypes.c_uint, ctypes.c_long, ctypes.c_ulong,
    ctypes.c_longlong, ctypes.c_ulonglong, ctypes.c_ssize_t, ctypes.c_size_t,
)

Integer = Union[int, ctypes.c_int8, ctypes.c_int16, ctypes.c_int32, ctypes.c_int64,
                ctypes.c_uint8, ctypes.c_uint16, ctypes.c_uint32, ctypes.c_uint64]

_decimal = re.compile(r'[0-9]+')


def parse_str(text: str) -> int:
    """base-10 text to unsigned 64-bit int"""
    if not _decimal.fullmatch(text):
        raise ParseError(text)
    value = int(text)
    if value > UINT64_MAX:
        raise ParseError(text, 'value out of range')
    return value


def parse_int(value: Integer) -> int:
    """reinterpret the raw bit pattern of an integer as unsigned 64-bit"""
    if isinstance(value, CTYPES_INTEGERS):
        return to_unsigned(value.value, ctypes.sizeof(value) * 8)
    if not INT64_MIN <= value <= UINT64_MAX:
        raise ParseError(value, 'value out of range')
    return to_unsigned(value)


def normalize(value) -> int:
    if isinstance(value, str):
        return parse_str(value)
    elif isinstance(value, bool):  # bool is an int subclass
        raise UnsupportedTypeError(value)
    elif isinstance(value, (int, *CTYPES_INTEGERS)):
        return parse_int(value)
    raise UnsupportedTypeError(value)


def unmarshal(target: Snowflake, value) -> Snowflake:
    """decode `value` into `target` with its current epoch, `target` is left untouched on error"""
    raw = normalize(value)
    timestamp, worker_id, process_id, sequence_id = snowflake.decode(raw, target.epoch)
    logging.debug(f'unmarshal {value!r} -> {raw} {timestamp} {worker_id} {process_id} {sequence_id}')
    target.timestamp = timestamp
    target.worker_id = worker_id
    target.process_id = process_id
    target.sequence_id = sequence_id
    return target
