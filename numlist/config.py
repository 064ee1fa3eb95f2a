# coding: utf-8
# The configuration identifier (a record-book number) and everything derived
# from it. Derived values are resolved once, here, and only read afterwards.
from typing import Optional, Sequence, Tuple
import logging

from numlist.chain import check_radix
from numlist.num import OPERATIONS, Operation

logger = logging.getLogger(__name__)

SUPPORTED_RADICES: Tuple[int, ...] = (2, 3, 8, 10, 16)
RECORD_BOOK_NUMBER = 11
OPERATION_COUNT = 7

class NumberListConfig:
    """Which radix new lists use, which radix they convert to, and which
    operator they combine with.

    `main_radix` is `supported_radices[n % len(supported_radices)]`,
    `additional_radix` is the entry after it (wrapping around), and
    `operation` is `operations[n % 7]`, all with floor modulo so any int
    identifier is usable.
    """

    def __init__(self,
            record_book_number: int = RECORD_BOOK_NUMBER,
            supported_radices: Sequence[int] = SUPPORTED_RADICES,
            operations: Optional[Sequence[Operation]] = None) -> None:
        radices = tuple(check_radix(r) for r in supported_radices)
        if not radices:
            raise ValueError('At least one supported radix is required')
        ops = tuple(OPERATIONS if operations is None else operations)
        if len(ops) != OPERATION_COUNT:
            raise ValueError('Expected {} operations, got {}'.format(
                OPERATION_COUNT, len(ops)))

        self.record_book_number = record_book_number
        self.supported_radices = radices
        self.operations = ops

        radix_index = record_book_number % len(radices)
        self.main_radix = radices[radix_index]
        self.additional_radix = radices[(radix_index + 1) % len(radices)]
        self.selector = record_book_number % OPERATION_COUNT
        self.operation = ops[self.selector]

        logger.debug('Resolved %r', self)

    def __repr__(self) -> str:
        return ('<NumberListConfig record_book_number={} main_radix={} '
                'additional_radix={} operation={}>').format(
                self.record_book_number, self.main_radix,
                self.additional_radix, self.operation.name)

DEFAULT_CONFIG = NumberListConfig()

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
