# coding: utf-8
# numlist: arbitrary-precision non-negative integers stored as circular,
# doubly-linked chains of digits in a configurable radix, with base
# conversion and cross-base arithmetic between them.
from typing import List, Optional
import argparse
import logging
import sys

from numlist.chain import DigitChain, InvalidDigit, IndexOutOfRange
from numlist.config import DEFAULT_CONFIG, NumberListConfig
from numlist.num import OPERATIONS, Operation, lookup_operation
from numlist.objects import NumberList

def describe(nl: NumberList) -> str:
    return '{} (radix {}, decimal {})'.format(
            str(nl) or '0', nl.radix, nl.to_decimal_string())

def list_operations(config: NumberListConfig) -> None:
    for i, op in enumerate(config.operations):
        marker = '*' if i == config.selector else ' '
        print('{} {} {:<4} {:<8} {}'.format(marker, i, op.name,
            ' '.join(op.aliases[1:]), op.docs or ''))

def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Digit-chain number lists')
    parser.add_argument('number', type=str, metavar='NUMBER', nargs='?',
            help='Unsigned decimal number')
    parser.add_argument('-f', '--file', type=str, metavar='FILE',
            help='Read the decimal number from the first line of FILE')
    parser.add_argument('--radix', type=int,
            help='Radix to hold the number in (default: from the record book number)')
    parser.add_argument('--record-book', type=int, default=None, metavar='N',
            dest='record_book', help='Configuration identifier')
    parser.add_argument('--change-scale', action='store_true',
            help='Also show the number in the additional radix')
    parser.add_argument('--op', type=str, metavar='OTHER',
            help='Combine with the decimal number OTHER using the selected operation')
    parser.add_argument('--operation', type=str, metavar='NAME',
            help='Use this operation instead of the selected one')
    parser.add_argument('--save', type=str, metavar='FILE',
            help='Write the number in decimal to FILE')
    parser.add_argument('--list-operations', action='store_true')
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('--version', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
            format='%(levelname)s %(name)s: %(message)s')

    if args.version:
        from numlist.__version__ import version
        print("numlist version " + version)
        return

    try:
        config = (DEFAULT_CONFIG if args.record_book is None
                else NumberListConfig(args.record_book))
        operation = (config.operation if args.operation is None
                else lookup_operation(args.operation))
        if args.list_operations:
            list_operations(config)
            return

        if args.file is not None:
            nl = NumberList.from_file(args.file, config=config)
            if args.radix is not None:
                nl = NumberList.from_int(nl.to_int(), radix=args.radix, config=config)
        else:
            nl = NumberList(args.number or '', radix=args.radix, config=config)
    except ValueError as e:
        parser.error(str(e))

    print(describe(nl))
    if args.change_scale:
        print('changed scale: ' + describe(nl.change_scale()))
    if args.op is not None:
        other = NumberList(args.op, radix=10, config=config)
        res = nl.combine(other, operation)
        assert res is not None
        print('{} {}: {}'.format(operation.name, other.to_decimal_string(), describe(res)))
    if args.save is not None and not nl.save(args.save):
        print('could not save to ' + args.save, file=sys.stderr)
        sys.exit(1)

__all__ = [
    'DigitChain', 'InvalidDigit', 'IndexOutOfRange',
    'NumberListConfig', 'DEFAULT_CONFIG',
    'Operation', 'OPERATIONS', 'lookup_operation',
    'NumberList', 'main',
]

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
