# coding: utf-8
# Positional codec: digit sequences <-> arbitrary-precision ints.
from typing import Iterable, List, Optional
import string

from numlist.chain import DigitChain

def to_base_digits(base: int, num: int) -> List[int]:
    # Zero (and anything below it) has no digits at all.
    if num <= 0: return []

    acc = []
    while num > 0:
        num, digit = divmod(num, base)
        acc.append(digit)
    return acc[::-1]

def from_base_digits(base: int, digits: Iterable[Optional[int]]) -> int:
    acc = 0
    for digit in digits:
        if digit is None: continue
        acc = base * acc + digit
    return acc

def decode_chain(chain: DigitChain) -> int:
    return from_base_digits(chain.radix, chain.values())

def encode_chain(num: int, radix: int) -> DigitChain:
    chain = DigitChain(radix)
    fill_chain(chain, num)
    return chain

def fill_chain(chain: DigitChain, num: int) -> None:
    chain.clear()
    for digit in to_base_digits(chain.radix, num):
        chain.append(digit)

# Decimal text. int() and str() refuse very long numerals since 3.11, so go
# through chunks that always stay under the limit.
DECIMAL_CHUNK = 1000
decimal_chunk_base = 10 ** DECIMAL_CHUNK

def int_of_decimal(s: str) -> int:
    head = len(s) % DECIMAL_CHUNK or DECIMAL_CHUNK
    acc = int(s[:head])
    for i in range(head, len(s), DECIMAL_CHUNK):
        acc = acc * decimal_chunk_base + int(s[i:i + DECIMAL_CHUNK])
    return acc

def decimal_of_int(num: int) -> str:
    if num < decimal_chunk_base: return str(num)
    chunks = to_base_digits(decimal_chunk_base, num)
    return str(chunks[0]) + ''.join(str(c).zfill(DECIMAL_CHUNK) for c in chunks[1:])

digits_upper = string.digits + string.ascii_uppercase
def digit_char(digit: int) -> str:
    # past Z just keep counting up from 'A'
    if digit < len(digits_upper):
        return digits_upper[digit]
    return chr(ord('A') + digit - 10)

def to_base_digits_upper(base: int, num: int) -> str:
    return ''.join(digit_char(d) for d in to_base_digits(base, num))

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
