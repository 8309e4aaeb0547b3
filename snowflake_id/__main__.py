# -*- coding: utf-8 -*-
import logging
import sys
from .config import options
from .errors import ParseError
from .misc import describe, dumps
from .parser import normalize
from .models import Snowflake, new_with_options, with_epoch, with_time, with_worker_id, with_process_id, \
    with_sequence_id
from .utils import LogSuppress


def format_line(snowflake_id: int, sf: Snowflake) -> str:
    return f'{snowflake_id} {sf.timestamp.isoformat()} {sf.worker_id} {sf.process_id} {sf.sequence_id}'


def decode_ids(values, epoch=0, as_json=False):
    """decode each value, malformed ones are logged and skipped"""
    lines = []
    for value in values:
        with LogSuppress(ParseError):
            snowflake_id = normalize(value)
            sf = Snowflake.parse(snowflake_id, epoch)
            lines.append(dumps(describe(sf, snowflake_id)) if as_json else format_line(snowflake_id, sf))
    return lines


def encode_id() -> Snowflake:
    opts = [with_epoch(options.epoch), with_worker_id(options.worker_id), with_process_id(options.process_id),
            with_sequence_id(options.sequence_id)]
    if options.time is not None:
        opts.append(with_time(options.time))
    sf = new_with_options(*opts)
    logging.info(f'encode {sf!r}')
    return sf


def main(args=None):
    values = options.parse_command_line(args)
    if values:
        lines = decode_ids(values, options.epoch, options.json)
        logging.info(f'decoded {len(lines)} / {len(values)}')
    else:
        lines = [str(encode_id())]
    for line in lines:
        print(line)
    return 0 if len(lines) == max(len(values), 1) else 1


if __name__ == '__main__':
    sys.exit(main())
