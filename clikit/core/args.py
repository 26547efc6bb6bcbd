"""Lightweight argv parsing into a key/value mapping.

Valid argument syntax::

    -h                        a boolean flag     -> {"h": True}
    --help                    a boolean flag     -> {"help": True}
    --output=false            a boolean flag     -> {"output": False}
    --count=3                 a number           -> {"count": 3}
    --name=John               a key-value pair   -> {"name": "John"}
    --full-name="John Doe"    a key-value pair   -> {"fullName": "John Doe"}
    "C:\\Program Files (x86)"  a positional       -> {"args": ["C:\\Program Files (x86)"]}

Tokens that match none of these (``-abc``, ``-n=5``) are ignored.
"""

import re
import sys
from typing import Any, Dict, List, Optional, Sequence, Union

ArgValue = Union[bool, int, str, List[str]]

_LEADING_DASHES = re.compile(r"^-{1,2}")
_ASSIGNMENT = re.compile(r"=.+")
_DASH_WORD = re.compile(r"-(\w)")
_FALSE_FLAG = re.compile(r"^--.+=\bfalse\b")
_TRUE_FLAG = re.compile(r"^-\w$|^--[^=]+$")
_NUMBER_FLAG = re.compile(r"^--.+=\d+$")
_STRING_FLAG = re.compile(r"^--.+=.+$")
_FLAG_PREFIX = re.compile(r"^--.+=")


def _flag_key(token: str) -> str:
    key = _LEADING_DASHES.sub("", token, count=1)
    key = _ASSIGNMENT.sub("", key, count=1)
    return _DASH_WORD.sub(lambda m: m.group(1).upper(), key)


def _flag_value(token: str) -> Optional[Union[bool, int, str]]:
    if _NUMBER_FLAG.match(token):
        return int(_FLAG_PREFIX.sub("", token, count=1))
    if _FALSE_FLAG.match(token):
        return False
    if _TRUE_FLAG.match(token):
        return True
    if _STRING_FLAG.match(token):
        return _FLAG_PREFIX.sub("", token, count=1)
    return None


def parse_args(argv: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """Parse command line tokens into a dict.

    Args:
        argv: Tokens to parse, defaults to ``sys.argv[1:]``

    Returns:
        Flags keyed by their camel-cased name; positional tokens collected,
        in order, under ``"args"``
    """
    if argv is None:
        argv = sys.argv[1:]

    results: Dict[str, Any] = {}
    for token in argv:
        if not token.startswith("-"):
            results.setdefault("args", []).append(token)
            continue

        value = _flag_value(token)
        if value is not None:
            results[_flag_key(token)] = value

    return results
