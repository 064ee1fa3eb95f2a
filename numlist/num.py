# coding: utf-8
# The binary operators a NumberList can be combined with. All of them live
# in the non-negative integers: anything that would leave that space
# (a negative difference, a zero divisor) comes out as 0 instead.
from typing import Callable, Dict, List, Optional
import operator

OperationFunc = Callable[[int, int], int]

class Operation:
    def __init__(self, name: str, func: OperationFunc,
            aliases: Optional[List[str]] = None,
            docs: Optional[str] = None) -> None:
        self.name = name
        self.func = func
        self.aliases: List[str] = aliases or [name]
        self.docs = docs

    def __call__(self, a: int, b: int) -> int:
        return self.func(a, b)

    def __repr__(self) -> str:
        return '<Operation {}>'.format(self.name)

def clamped_sub(a: int, b: int) -> int:
    return a - b if a >= b else 0

def guarded_intdiv(a: int, b: int) -> int:
    if b == 0: return 0
    return a // b

def guarded_mod(a: int, b: int) -> int:
    if b == 0: return 0
    return a % b

# Order matters: the position is the selector.
OPERATIONS: List[Operation] = [
    Operation('add', operator.add, ['add', '+'],
        docs="Sum."),
    Operation('sub', clamped_sub, ['sub', '-'],
        docs="Difference, 0 if it would be negative."),
    Operation('mul', operator.mul, ['mul', '*'],
        docs="Product."),
    Operation('div', guarded_intdiv, ['div', '/'],
        docs="Integer quotient, 0 when dividing by 0."),
    Operation('mod', guarded_mod, ['mod', '%'],
        docs="Remainder, 0 when dividing by 0."),
    Operation('and', operator.and_, ['and', '&'],
        docs="Bitwise and."),
    Operation('or', operator.or_, ['or', '|'],
        docs="Bitwise or."),
]

operation_dict: Dict[str, Operation] = {
    alias: op for op in OPERATIONS for alias in op.aliases
}

def lookup_operation(name: str) -> Operation:
    try:
        return operation_dict[name]
    except KeyError:
        raise ValueError('No operation named ' + repr(name)) from None

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
