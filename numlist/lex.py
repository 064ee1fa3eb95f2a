# coding: utf-8
from typing import Optional
import logging
import re

from numlist.base import int_of_decimal

logger = logging.getLogger(__name__)

# Unsigned decimal numerals only: no sign, no separators, no exponent.
# [0-9] rather than \d so other scripts' digits don't sneak in.
decimal_literal_pattern = re.compile(r'[0-9]+')

def is_decimal_literal(token: str) -> bool:
    return bool(decimal_literal_pattern.fullmatch(token))

def parse_decimal(text: Optional[str]) -> Optional[int]:
    if text is None: return None
    token = text.strip()
    if not is_decimal_literal(token):
        logger.debug('Not an unsigned decimal numeral: %r', text)
        return None
    return int_of_decimal(token)

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
