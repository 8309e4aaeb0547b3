import logging
import contextlib


class LogSuppress(contextlib.suppress):
    def __init__(self, *exceptions):
        if not exceptions:
            exceptions = [Exception]
        super().__init__(*exceptions)

    def __exit__(self, exc_type, exc_val, exc_tb):
        suppress = super().__exit__(exc_type, exc_val, exc_tb)
        if suppress:
            logging.exception('suppressed')
        return suppress


def mask(bits: int) -> int:
    return (1 << bits) - 1


def to_unsigned(value: int, bits=64) -> int:
    """two's-complement bit pattern of `value` as an unsigned int"""
    return value & mask(bits)


def to_signed(value: int, bits=64) -> int:
    value = to_unsigned(value, bits)
    if value >> (bits - 1):
        value -= 1 << bits
    return value
