# -*- coding: utf-8 -*-
import ctypes
from datetime import datetime, timezone
from typing import Callable
from pydantic import BaseModel, Field
from . import snowflake, parser
from .utils import to_signed


def utcnow():
    return datetime.now(timezone.utc)


class Snowflake(BaseModel):
    """decoded snowflake id, see `snowflake.make` for the bit layout"""
    epoch: int = 0  # custom epoch in milliseconds, e.g. discord's 1420070400000
    timestamp: datetime = Field(default_factory=utcnow)
    worker_id: int = 0
    process_id: int = 0
    sequence_id: int = 0

    @classmethod
    def parse(cls, value, epoch=0) -> 'Snowflake':
        return cls(epoch=epoch).unmarshal(value)

    def unmarshal(self, value) -> 'Snowflake':
        return parser.unmarshal(self, value)

    def to_uint64(self) -> int:
        return snowflake.encode(self.timestamp, self.worker_id, self.process_id, self.sequence_id, self.epoch)

    def to_int64(self) -> int:
        return to_signed(self.to_uint64())

    def to_uint(self) -> int:
        return ctypes.c_size_t(self.to_uint64()).value

    def to_int(self) -> int:
        return ctypes.c_ssize_t(self.to_uint64()).value

    def __int__(self):
        return self.to_uint64()

    def __str__(self):
        return str(self.to_uint64())


Option = Callable[[Snowflake], None]


def new() -> Snowflake:
    return Snowflake()


def new_with_options(*options: Option) -> Snowflake:
    """apply `options` in order over the defaults, a later option wins over an earlier one"""
    sf = Snowflake()
    for option in options:
        option(sf)
    return sf


def with_epoch(epoch: int) -> Option:
    def option(sf: Snowflake):
        sf.epoch = epoch

    return option


def with_time(timestamp: datetime) -> Option:
    def option(sf: Snowflake):
        sf.timestamp = timestamp

    return option


def with_worker_id(worker_id: int) -> Option:
    def option(sf: Snowflake):
        sf.worker_id = worker_id

    return option


def with_process_id(process_id: int) -> Option:
    def option(sf: Snowflake):
        sf.process_id = process_id

    return option


def with_sequence_id(sequence_id: int) -> Option:
    def option(sf: Snowflake):
        sf.sequence_id = sequence_id

    return option
