# -*- coding: utf-8 -*-
import logging
from datetime import datetime
from tornado.log import LogFormatter
from tornado.options import define, parse_config_file
from tornado.options import options
from concurrent_log_handler import ConcurrentRotatingFileHandler

LOG_FORMAT = '%(color)s[%(levelname)1.1s %(asctime)s %(module)s:%(funcName)s:%(lineno)d %(process)d]%(end_color)s ' \
             '%(message)s'

_channel = None


def parse_callback():
    global _channel
    logger = logging.getLogger()
    if _channel:  # parsed again
        logger.removeHandler(_channel)
    if options.log_file:
        _channel = ConcurrentRotatingFileHandler(filename=options.log_file, maxBytes=options.log_file_max_size,
                                                 backupCount=options.log_file_num_backups, encoding='utf-8')
    else:
        _channel = logging.StreamHandler()
    _channel.setFormatter(LogFormatter(fmt=LOG_FORMAT, datefmt='', color=not options.log_file))
    logger.addHandler(_channel)


options.log_to_stderr = False
options.add_parse_callback(parse_callback)

define('config', type=str, help='path to config file', callback=lambda path: parse_config_file(path, final=False))
define('epoch', 0, int, 'custom epoch in milliseconds')
define('time', None, datetime, 'timestamp of the generated id, now if none')
define('worker_id', 0, int, 'worker id of the generated id')
define('process_id', 0, int, 'process id of the generated id')
define('sequence_id', 0, int, 'sequence id of the generated id')
define('json', False, bool, 'print decoded ids as json')
define('log_file', type=str, help='log file path')
