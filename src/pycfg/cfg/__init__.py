# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 21:58:02
# @Author : Kariko Lin

from .consts import MAX_NAME_LEN, CfgMark
from .cursor import Cursor
from .model import CfgDocument, CfgEntry, CfgSection, CfgTriple, new_document
from .parser import (
    CfgError,
    MalformedAssignment,
    InvalidCfgRecord,
    parse,
    dump,
    to_json,
    to_yaml,
    CfgParser,
    CfgJsonParser,
    CfgYamlParser
)
