"""Placeholder tokens embedded in compiled output.

The source transformer rewrites each translated template literal into a
call token and each reference to the active locale into a sentinel; the
bundle replicator later replaces both with per-locale literals.

Grammar:
    call   := "__$T$__(" ws json-string ( ws "," ws json-literal )* ws ")"
    locale := "__$LOCALE$__"

The key is the canonical translation key. Arguments are JSON literals
(string, number, boolean, null) captured at transform time.

Python 3.13+.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias

from statici18n.constants import CALL_TOKEN_PREFIX, LOCALE_TOKEN
from statici18n.diagnostics import ErrorTemplate, PlaceholderSyntaxError
from statici18n.localization.types import TranslationKey

if TYPE_CHECKING:
    from statici18n.runtime.accumulator import KeyAccumulator

__all__ = [
    "CALL_TOKEN_PREFIX",
    "LOCALE_TOKEN",
    "PlaceholderCall",
    "SourceTransformer",
    "make_call_token",
    "replace_tokens",
    "scan_call_tokens",
]

_WHITESPACE = " \t\n\r"
_DECODER = json.JSONDecoder()

TokenLiteral: TypeAlias = str | int | float | bool | None


class SourceTransformer(Protocol):
    """Protocol for the code rewriter that emits placeholder tokens.

    Implementations parse a module of the target language, replace each
    translation call with a call token built by make_call_token(), replace
    locale references with LOCALE_TOKEN, and record every key they see.
    Keys in ``keys.plural_keys`` must keep their arguments available to
    runtime interpolation, since their value is only known at request time.

    Transforms of different modules must be independent: they may run in
    any order or concurrently, sharing only the accumulator.
    """

    def transform(self, code: str, module_id: str, keys: KeyAccumulator) -> str | None:
        """Rewrite one module.

        Args:
            code: Module source
            module_id: Module identifier (path, possibly with a query suffix)
            keys: Accumulator for referenced keys

        Returns:
            Rewritten source, or None when the module is unchanged
        """


@dataclass(frozen=True, slots=True)
class PlaceholderCall:
    """A parsed call token.

    Attributes:
        key: Translation key
        args: Literal arguments captured at transform time
        start: Offset of the token in the scanned text
        end: Offset just past the closing parenthesis
    """

    key: TranslationKey
    args: tuple[TokenLiteral, ...]
    start: int
    end: int


def make_call_token(key: TranslationKey, *args: TokenLiteral) -> str:
    """Build the call token a transformer emits for a translation call.

    Example:
        >>> make_call_token("Hello $1!", "Ann")
        '__$T$__("Hello $1!", "Ann")'
    """
    encoded = ", ".join(json.dumps(value, ensure_ascii=False) for value in (key, *args))
    return f"{CALL_TOKEN_PREFIX}{encoded})"


def _skip_ws(code: str, pos: int) -> int:
    while pos < len(code) and code[pos] in _WHITESPACE:
        pos += 1
    return pos


def _parse_call(code: str, start: int, file_name: str) -> PlaceholderCall:
    def _fail(reason: str) -> PlaceholderSyntaxError:
        return PlaceholderSyntaxError(
            ErrorTemplate.placeholder_invalid(file_name, start, reason),
            file_name=file_name,
            offset=start,
        )

    pos = _skip_ws(code, start + len(CALL_TOKEN_PREFIX))
    try:
        key, pos = _DECODER.raw_decode(code, pos)
    except json.JSONDecodeError as e:
        raise _fail(f"key is not a JSON string ({e.msg})") from e
    if not isinstance(key, str):
        raise _fail("key is not a JSON string")

    args: list[TokenLiteral] = []
    while True:
        pos = _skip_ws(code, pos)
        if pos >= len(code):
            raise _fail("unterminated placeholder")
        if code[pos] == ")":
            return PlaceholderCall(key=key, args=tuple(args), start=start, end=pos + 1)
        if code[pos] != ",":
            raise _fail(f"unexpected character {code[pos]!r}")
        pos = _skip_ws(code, pos + 1)
        try:
            value, pos = _DECODER.raw_decode(code, pos)
        except json.JSONDecodeError as e:
            raise _fail(f"argument {len(args) + 1} is not a JSON literal ({e.msg})") from e
        if isinstance(value, list | dict):
            raise _fail(f"argument {len(args) + 1} is not a JSON literal")
        args.append(value)


def scan_call_tokens(code: str, file_name: str = "") -> Iterator[PlaceholderCall]:
    """Yield every call token in a text, in order.

    Raises:
        PlaceholderSyntaxError: If a token prefix is not followed by a valid call
    """
    pos = code.find(CALL_TOKEN_PREFIX)
    while pos != -1:
        call = _parse_call(code, pos, file_name)
        yield call
        pos = code.find(CALL_TOKEN_PREFIX, call.end)


def replace_tokens(
    code: str,
    locale: str,
    render: Callable[[PlaceholderCall], str],
    *,
    file_name: str = "",
) -> str:
    """Replace every call token and locale sentinel in a text.

    Text produced by ``render`` is inserted as-is and never rescanned.

    Args:
        code: Artifact text
        locale: Replacement for the locale sentinel
        render: Produces the replacement literal for one call token
        file_name: Artifact name for error messages

    Returns:
        Text without placeholder tokens
    """
    parts: list[str] = []
    pos = 0
    for call in scan_call_tokens(code, file_name):
        parts.append(code[pos : call.start].replace(LOCALE_TOKEN, locale))
        parts.append(render(call))
        pos = call.end
    parts.append(code[pos:].replace(LOCALE_TOKEN, locale))
    return "".join(parts)
