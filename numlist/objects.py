# coding: utf-8
# NumberList: a non-negative integer held as a circular chain of digits,
# behaving as a mutable sequence of those digits.
from typing import (
        Iterable, Iterator, List, MutableSequence, Optional, Sequence, Set,
        )
import logging

from numlist.chain import DigitChain
from numlist.config import DEFAULT_CONFIG, NumberListConfig
from numlist.num import Operation
import numlist.base as base
import numlist.lex as lex
import numlist.persist as persist

logger = logging.getLogger(__name__)

def _is_digit_like(obj: object) -> bool:
    return isinstance(obj, int) and not isinstance(obj, bool)

class NumberList(MutableSequence[int]):
    """A number in `radix`, most significant digit first.

    Without an explicit radix, lists use `config.main_radix`. A string value
    is read as an unsigned decimal numeral; anything else that is not one
    (negative, empty, garbage) gives the empty list, which is zero.
    """

    def __init__(self,
            value: Optional[str] = None,
            radix: Optional[int] = None,
            config: Optional[NumberListConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self._chain = DigitChain(self.config.main_radix if radix is None else radix)
        if value is not None:
            self._init_from_decimal_string(value)

    # construction {{{
    @classmethod
    def from_int(cls, value: int,
            radix: Optional[int] = None,
            config: Optional[NumberListConfig] = None) -> 'NumberList':
        ret = cls(radix=radix, config=config)
        base.fill_chain(ret._chain, value)
        return ret

    @classmethod
    def from_digits(cls, digits: Iterable[int],
            radix: Optional[int] = None,
            config: Optional[NumberListConfig] = None) -> 'NumberList':
        ret = cls(radix=radix, config=config)
        for digit in digits:
            ret._chain.append(digit)
        return ret

    @classmethod
    def from_file(cls, path: Optional[persist.PathLike],
            config: Optional[NumberListConfig] = None) -> 'NumberList':
        return cls(persist.load_line(path), config=config)

    def _init_from_decimal_string(self, value: Optional[str]) -> None:
        self._chain.clear()
        num = lex.parse_decimal(value)
        if num is not None:
            base.fill_chain(self._chain, num)

    def _derived(self, radix: int, num: int) -> 'NumberList':
        return NumberList.from_int(num, radix=radix, config=self.config)
    # }}}
    # persistence {{{
    def save(self, path: Optional[persist.PathLike]) -> bool:
        return persist.save_line(path, self.to_decimal_string())
    # }}}

    @property
    def radix(self) -> int:
        return self._chain.radix

    @property
    def chain(self) -> DigitChain:
        return self._chain

    # numeric views {{{
    def to_int(self) -> int:
        return base.decode_chain(self._chain)

    def __int__(self) -> int:
        return self.to_int()

    def to_decimal_string(self) -> str:
        return base.decimal_of_int(self.to_int())
    # }}}
    # conversion and combination {{{
    def change_scale(self) -> 'NumberList':
        """The same number in `config.additional_radix`. Leaves self alone."""
        return self._derived(self.config.additional_radix, self.to_int())

    def combine(self, other: Optional[Iterable[Optional[int]]],
            operation: Operation) -> Optional['NumberList']:
        """Apply `operation` to this number and `other`.

        Another NumberList is read in its own radix; any other iterable of
        digits is read in this list's radix, skipping None entries. Returns
        None when there is no `other`, otherwise a new list in
        `config.additional_radix`.
        """
        if other is None:
            return None

        a = self.to_int()
        if isinstance(other, NumberList):
            b = other.to_int()
        else:
            b = base.from_base_digits(self.radix, other)

        res = operation(a, b)
        logger.debug('%s(%d, %d) = %d', operation.name, a, b, res)
        return self._derived(self.config.additional_radix, res)

    def additional_operation(self, other: Optional[Iterable[Optional[int]]]) -> Optional['NumberList']:
        return self.combine(other, self.config.operation)
    # }}}
    # structural utilities {{{
    def sort_ascending(self) -> None:
        self._chain.sort()

    def sort_descending(self) -> None:
        self._chain.sort(reverse=True)

    def rotate_left(self) -> None:
        self._chain.rotate_left()

    def rotate_right(self) -> None:
        self._chain.rotate_right()

    shift_left = rotate_left
    shift_right = rotate_right

    def swap(self, index1: int, index2: int) -> bool:
        return self._chain.swap(index1, index2)
    # }}}
    # sequence protocol {{{
    def __len__(self) -> int:
        return len(self._chain)

    def __getitem__(self, index: int) -> int: # type: ignore
        return self._chain.get(index)

    def __setitem__(self, index: int, digit: int) -> None: # type: ignore
        self._chain.set(index, digit)

    def __delitem__(self, index: int) -> None: # type: ignore
        self._chain.remove_at(index)

    def insert(self, index: int, digit: int) -> None:
        self._chain.insert_at(index, digit)

    def append(self, digit: int) -> None:
        self._chain.append(digit)

    def pop(self, index: Optional[int] = None) -> int:
        if index is None:
            index = len(self._chain) - 1
        return self._chain.remove_at(index)

    def clear(self) -> None:
        self._chain.clear()

    def __iter__(self) -> Iterator[int]:
        return self._chain.values()

    def __reversed__(self) -> Iterator[int]:
        return self._chain.values_reversed()

    def __contains__(self, digit: object) -> bool:
        return _is_digit_like(digit) and self._chain.locate(digit) >= 0

    def index(self, digit: object, start: int = 0, stop: Optional[int] = None) -> int:
        if start == 0 and stop is None:
            i = self.index_of(digit)
            if i < 0:
                raise ValueError('{!r} is not in NumberList'.format(digit))
            return i
        return super().index(digit, start, stop)

    def index_of(self, digit: object) -> int:
        if not _is_digit_like(digit): return -1
        return self._chain.locate(digit)

    def last_index_of(self, digit: object) -> int:
        if not _is_digit_like(digit): return -1
        return self._chain.locate_last(digit)
    # }}}
    # bulk operations {{{
    def contains_all(self, digits: Iterable[object]) -> bool:
        return all(d in self for d in digits)

    def remove_all(self, digits: Iterable[object]) -> bool:
        modified = False
        for d in digits:
            if not _is_digit_like(d): continue
            while self._chain.remove_value(d): # type: ignore
                modified = True
        return modified

    def retain_all(self, digits: Iterable[object]) -> bool:
        keep: Set[object] = set(d for d in digits if _is_digit_like(d))
        modified = False
        for i in range(len(self._chain) - 1, -1, -1):
            if self._chain.get(i) not in keep:
                self._chain.remove_at(i)
                modified = True
        return modified

    def to_list(self) -> List[int]:
        return list(self._chain.values())
    # }}}
    # comparison and display {{{
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Sequence) or isinstance(other, str):
            return NotImplemented
        if len(self) != len(other):
            return False
        for mine, theirs in zip(self._chain.values(), other):
            if not _is_digit_like(theirs) or mine != theirs:
                return False
        return True

    __hash__ = None # type: ignore

    def __str__(self) -> str:
        return ''.join(base.digit_char(d) for d in self._chain.values())

    def __repr__(self) -> str:
        return '<NumberList radix={} {!r}>'.format(self.radix, str(self))
    # }}}

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
