# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 20:40:37
# @Author : Kariko Lin

import logging

from .cfg import (
    CfgDocument, CfgSection, CfgEntry,
    CfgError, MalformedAssignment, InvalidCfgRecord,
    CfgParser, CfgJsonParser, CfgYamlParser,
    parse, dump
)

__all__ = [
    'CfgDocument', 'CfgSection', 'CfgEntry',
    'CfgError', 'MalformedAssignment', 'InvalidCfgRecord',
    'CfgParser', 'CfgJsonParser', 'CfgYamlParser',
    'parse', 'dump'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
