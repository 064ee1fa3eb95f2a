# coding: utf-8
# The circular doubly-linked digit chain. Nodes live in an arena: parallel
# lists of values and next/prev slot numbers, so a "pointer" is just an int
# and the chain never owns a reference cycle.
from typing import Iterator, List, Optional

MIN_RADIX = 2
MAX_RADIX = 256 # digits are stored with 8-bit width

NIL = -1

# exceptions {{{
class InvalidDigit(ValueError):
    def __init__(self, digit: object, radix: int) -> None:
        super().__init__('Digit {!r} is not valid for radix {}'.format(digit, radix))
        self.digit = digit
        self.radix = radix

class IndexOutOfRange(IndexError):
    def __init__(self, index: object, size: int) -> None:
        super().__init__('Index: {!r}, Size: {}'.format(index, size))
        self.index = index
        self.size = size
# }}}

def is_radix(radix: object) -> bool:
    return (isinstance(radix, int) and not isinstance(radix, bool)
            and MIN_RADIX <= radix <= MAX_RADIX)

def check_radix(radix: int) -> int:
    if not is_radix(radix):
        raise ValueError('Radix must be an int in [{}, {}], got {!r}'.format(
            MIN_RADIX, MAX_RADIX, radix))
    return radix

class DigitChain:
    """An ordered, circular, doubly-linked run of digits in a fixed radix.

    Index 0 is the most significant digit. The empty chain is the only
    representation of zero, and owns no slots at all.
    """

    def __init__(self, radix: int) -> None:
        self._radix = check_radix(radix)
        self._values: List[int] = []
        self._next:   List[int] = []
        self._prev:   List[int] = []
        self._free:   List[int] = []
        self._head = NIL
        self._tail = NIL
        self._count = 0

    @property
    def radix(self) -> int:
        return self._radix

    def __len__(self) -> int:
        return self._count

    def __repr__(self) -> str:
        return '<DigitChain radix={} {}>'.format(self._radix, list(self.values()))

    # arena {{{
    def _alloc(self, value: int) -> int:
        if self._free:
            slot = self._free.pop()
            self._values[slot] = value
            self._next[slot] = slot
            self._prev[slot] = slot
        else:
            slot = len(self._values)
            self._values.append(value)
            self._next.append(slot)
            self._prev.append(slot)
        return slot

    def _release(self, slot: int) -> None:
        self._values[slot] = 0
        self._next[slot] = NIL
        self._prev[slot] = NIL
        self._free.append(slot)

    def _reset(self) -> None:
        self._values = []
        self._next = []
        self._prev = []
        self._free = []
        self._head = NIL
        self._tail = NIL
        self._count = 0
    # }}}
    # digit validation {{{
    def is_valid_digit(self, digit: object) -> bool:
        return (isinstance(digit, int) and not isinstance(digit, bool)
                and 0 <= digit < self._radix)

    def check_digit(self, digit: object) -> int:
        if not self.is_valid_digit(digit):
            raise InvalidDigit(digit, self._radix)
        assert isinstance(digit, int)
        return digit
    # }}}
    # linking {{{
    def _link_last(self, value: int) -> int:
        slot = self._alloc(value)
        if self._count == 0:
            self._head = self._tail = slot
        else:
            self._prev[slot] = self._tail
            self._next[slot] = self._head
            self._next[self._tail] = slot
            self._prev[self._head] = slot
            self._tail = slot
        self._count += 1
        return slot

    def _link_before(self, succ: int, value: int) -> int:
        slot = self._alloc(value)
        pred = self._prev[succ]
        self._next[slot] = succ
        self._prev[slot] = pred
        self._next[pred] = slot
        self._prev[succ] = slot
        self._count += 1
        return slot

    def _unlink(self, slot: int) -> None:
        if self._count == 1:
            self._reset()
            return
        pred = self._prev[slot]
        succ = self._next[slot]
        self._next[pred] = succ
        self._prev[succ] = pred
        if slot == self._head:
            self._head = succ
        if slot == self._tail:
            self._tail = pred
        self._release(slot)
        self._count -= 1

    def _slot(self, index: int) -> int:
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError('Chain indices must be integers, not ' + type(index).__name__)
        if index < 0 or index >= self._count:
            raise IndexOutOfRange(index, self._count)
        # walk from whichever end is closer
        if index <= self._count // 2:
            cur = self._head
            for _ in range(index):
                cur = self._next[cur]
        else:
            cur = self._tail
            for _ in range(self._count - 1 - index):
                cur = self._prev[cur]
        return cur
    # }}}
    # positional access {{{
    def append(self, digit: int) -> None:
        self._link_last(self.check_digit(digit))

    def get(self, index: int) -> int:
        return self._values[self._slot(index)]

    def set(self, index: int, digit: int) -> int:
        slot = self._slot(index)
        value = self.check_digit(digit)
        old = self._values[slot]
        self._values[slot] = value
        return old

    def insert_at(self, index: int, digit: int) -> None:
        if isinstance(index, int) and index == self._count:
            self.append(digit)
            return
        succ = self._slot(index)
        slot = self._link_before(succ, self.check_digit(digit))
        if index == 0:
            self._head = slot

    def remove_at(self, index: int) -> int:
        slot = self._slot(index)
        old = self._values[slot]
        self._unlink(slot)
        return old

    def remove_value(self, digit: int) -> bool:
        cur = self._head
        for _ in range(self._count):
            if self._values[cur] == digit:
                self._unlink(cur)
                return True
            cur = self._next[cur]
        return False

    def locate(self, digit: object) -> int:
        cur = self._head
        for i in range(self._count):
            if self._values[cur] == digit:
                return i
            cur = self._next[cur]
        return -1

    def locate_last(self, digit: object) -> int:
        cur = self._tail
        for i in range(self._count - 1, -1, -1):
            if self._values[cur] == digit:
                return i
            cur = self._prev[cur]
        return -1

    def clear(self) -> None:
        self._reset()
    # }}}
    # traversal {{{
    def slots(self) -> List[int]:
        """Node handles in chain order. Stable for as long as the node lives."""
        ret: List[int] = []
        cur = self._head
        for _ in range(self._count):
            ret.append(cur)
            cur = self._next[cur]
        return ret

    def values(self) -> Iterator[int]:
        cur = self._head
        for _ in range(self._count):
            yield self._values[cur]
            cur = self._next[cur]

    def values_reversed(self) -> Iterator[int]:
        cur = self._tail
        for _ in range(self._count):
            yield self._values[cur]
            cur = self._prev[cur]

    @property
    def head(self) -> Optional[int]:
        return None if self._count == 0 else self._head

    @property
    def tail(self) -> Optional[int]:
        return None if self._count == 0 else self._tail

    def next_of(self, slot: int) -> int:
        return self._next[slot]

    def prev_of(self, slot: int) -> int:
        return self._prev[slot]

    def value_of(self, slot: int) -> int:
        return self._values[slot]
    # }}}
    # structural utilities {{{
    def sort(self, reverse: bool = False) -> None:
        if self._count <= 1:
            return
        ordered = sorted(self.values(), reverse=reverse)
        cur = self._head
        for value in ordered:
            self._values[cur] = value
            cur = self._next[cur]

    def rotate_left(self) -> None:
        if self._count <= 1:
            return
        self._head = self._next[self._head]
        self._tail = self._next[self._tail]

    def rotate_right(self) -> None:
        if self._count <= 1:
            return
        self._head = self._prev[self._head]
        self._tail = self._prev[self._tail]

    def swap(self, i: int, j: int) -> bool:
        if not (0 <= i < self._count and 0 <= j < self._count):
            return False
        if i == j:
            return True
        a = self._slot(i)
        b = self._slot(j)
        self._values[a], self._values[b] = self._values[b], self._values[a]
        return True
    # }}}

    def check_invariants(self) -> None:
        if self._count == 0:
            assert self._head == NIL and self._tail == NIL, 'empty chain keeps an end'
            assert not self._values, 'empty chain keeps slots'
            return
        assert self._prev[self._head] == self._tail, 'head.prev is not tail'
        assert self._next[self._tail] == self._head, 'tail.next is not head'
        seen = set()
        cur = self._head
        for _ in range(self._count):
            assert cur not in seen, 'chain revisits a node before count steps'
            assert cur not in self._free, 'chain reaches a released slot'
            assert self._prev[self._next[cur]] == cur, 'next/prev disagree'
            assert 0 <= self._values[cur] < self._radix, 'digit out of range'
            seen.add(cur)
            cur = self._next[cur]
        assert cur == self._head, 'forward walk does not return to head'
        cur = self._tail
        for _ in range(self._count):
            cur = self._prev[cur]
        assert cur == self._tail, 'backward walk does not return to tail'
        assert len(seen) + len(self._free) == len(self._values), 'leaked slots'

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
