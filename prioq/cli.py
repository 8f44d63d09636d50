#!/usr/bin/env python

import argparse
import logging
import sys
from os import path
from typing import *

from prioq import config_provider
from prioq.config_provider import CastFn
from prioq.priority_queue import PriorityQueue

# YAML config keys
LOGGING_LEVEL_KEY = "logging_level"
QUEUE_ROOT_KEY = "queue"
VALUE_TYPE_KEY = "value_type"

# Global defaults
DEFAULT_CONFIG_PATH = "resources/prioq.yml"
DEFAULT_LOGGING_LEVEL = "INFO"
DEFAULT_VALUE_TYPE = "int"

_log = logging.getLogger("prioq")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="prioq",
        description="Prints values in priority order.  Values are read from the arguments or, when none are given, "
                    "whitespace separated from stdin."
    )
    parser.add_argument('-c', '--config', type=str, help="path to config file", default=None)
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument('-a', '--ascending', dest="ascending", action="store_const", const=True, default=None,
                           help="print the smallest value first")
    direction.add_argument('-d', '--descending', dest="ascending", action="store_const", const=False,
                           help="print the largest value first (default)")
    parser.add_argument('values', nargs='*', help="values to order")
    return parser.parse_args(argv)


def load_config(config_path: Optional[str]) -> None:
    """
    Loads the given config file.  Without an explicit path the default config is loaded if it exists, otherwise
    built-in defaults are used.
    :param config_path: path to a yaml config, or None
    """
    if config_path is not None:
        config_provider.load_file(path.expanduser(config_path))
    elif path.isfile(DEFAULT_CONFIG_PATH):
        config_provider.load_file(DEFAULT_CONFIG_PATH)
    else:
        config_provider._load_string("")


def build_queue(raw_values: Iterable[str], ascending: Optional[bool]) -> PriorityQueue:
    """
    Casts the raw values according to the configured value type and pushes them into a new queue.
    :param raw_values: values as read from the command line or stdin
    :param ascending: queue direction, or None to use the configured direction
    :return:
    :raise: ValueError if a value cannot be cast
    """
    value_type = config_provider.get_value([QUEUE_ROOT_KEY, VALUE_TYPE_KEY], DEFAULT_VALUE_TYPE)
    cast_fn = CastFn.by_name(value_type)
    values = list()
    for raw in raw_values:
        try:
            values.append(cast_fn(raw))
        except ValueError as e:
            raise ValueError(f"Unable to read {raw!r} as {value_type}.") from e
    if ascending is None:
        return PriorityQueue.from_config([QUEUE_ROOT_KEY], starting_values=values)
    return PriorityQueue(ascending=ascending, starting_values=values)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    load_config(args.config)
    logging.basicConfig(level=config_provider.get_value([LOGGING_LEVEL_KEY], DEFAULT_LOGGING_LEVEL))

    raw_values = args.values if args.values else sys.stdin.read().split()
    try:
        queue = build_queue(raw_values, args.ascending)
    except ValueError as e:
        _log.error(e)
        return 1

    _log.debug(f"Ordering {queue.count} value(s), {queue.ordering.value}.")
    for value in queue.drain():
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())
