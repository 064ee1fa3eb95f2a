# coding: utf-8
# Best-effort decimal text persistence. Nothing here raises on I/O trouble:
# reads come back as None, writes come back as False, and the reason goes to
# the log.
from typing import IO, Optional, Union
import logging
import os

logger = logging.getLogger(__name__)

PathLike = Union[str, 'os.PathLike[str]']

def line(file: IO[str]) -> Optional[str]:
    try:
        ret = file.readline()
    except (OSError, ValueError) as e:
        # ValueError covers closed files and UnicodeDecodeError
        logger.warning('Could not read a line from %r: %s', file, e)
        return None
    if not ret:
        # empty string means EOF
        return None
    return ret.rstrip('\r\n')

def write_line(file: IO[str], text: str) -> bool:
    try:
        file.write(text)
        file.write('\n')
        return True
    except (OSError, ValueError) as e:
        logger.warning('Could not write a line to %r: %s', file, e)
        return False

def load_line(path: Optional[PathLike]) -> Optional[str]:
    if path is None: return None
    if not os.path.isfile(path):
        logger.debug('No file to load at %s', path)
        return None
    try:
        with open(path, 'r', encoding='utf-8') as file:
            return line(file)
    except OSError as e:
        logger.warning('Could not open %s for reading: %s', path, e)
        return None

def save_line(path: Optional[PathLike], text: str) -> bool:
    if path is None: return False
    try:
        with open(path, 'w', encoding='utf-8') as file:
            return write_line(file, text)
    except OSError as e:
        logger.warning('Could not open %s for writing: %s', path, e)
        return False

# vim:set tabstop=4 shiftwidth=4 expandtab fdm=marker:
