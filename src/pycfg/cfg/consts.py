# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 20:47:31
# @Author : Kariko Lin

from enum import Enum

# the old C buffers were 256 bytes, terminator included.
MAX_NAME_LEN = 255


class CfgMark(str, Enum):
    COMMENT = '#'
    QUOTE = '"'
    ASSIGN = '='
    SECTION_BEGIN = '['
    SECTION_END = ']'
