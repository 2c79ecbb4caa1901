"""Hand-written parser for the CSS emitted by the snapshot engine.

Syntax example:
    .ds0 { display:block; color:rgb(0, 0, 0); }
    .ds1, .ds4-p::before { content:"\\2605"; font-size:12px; }

Only class selectors (optionally with ``::before`` / ``::after``) are
accepted; anything else means the CSS did not come from domsnap.
"""

from __future__ import annotations

import re

from domsnap.errors import StylesheetError
from domsnap.stylesheet.model import Selector, StyleRule, Stylesheet

__all__ = ["parse_stylesheet"]

# Matches a complete rule: selectors { declarations }
_RULE_RE = re.compile(
    r"""
    (?P<selectors>[^{}]+)    # everything before the opening brace
    \{                        # opening brace
    (?P<body>(?:"[^"]*"|'[^']*'|[^}"'])*)  # declarations, quoted strings kept whole
    \}                        # closing brace
    """,
    re.VERBOSE,
)

# Matches a single declaration: property:value;
_DECL_RE = re.compile(
    r"""
    (?P<name>-?[a-zA-Z_][a-zA-Z0-9_-]*)    # property name
    \s*:\s*                                  # colon separator
    (?P<value>(?:"[^"]*"|'[^']*'|[^;"'])*?)  # value, quoted strings kept whole
    \s*(?:;|\Z)                               # semicolon, optional on the last one
    """,
    re.VERBOSE,
)

_SELECTOR_RE = re.compile(r"^\.(?P<cls>[^\s.:,]+)(?:::(?P<pseudo>before|after))?$")


def _parse_selector(raw: str, index: int) -> Selector:
    match = _SELECTOR_RE.match(raw.strip())
    if match is None:
        raise StylesheetError(f"Invalid selector: {raw.strip()!r}", rule_index=index)
    return Selector(class_name=match.group("cls"), pseudo=match.group("pseudo"))


def _parse_declarations(body: str) -> tuple[str, ...]:
    return tuple(
        f"{m.group('name').lower()}:{m.group('value').strip()};"
        for m in _DECL_RE.finditer(body)
    )


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse emitted CSS into a Stylesheet, preserving rule order."""
    rules: list[StyleRule] = []
    for index, match in enumerate(_RULE_RE.finditer(source)):
        selectors = tuple(
            _parse_selector(raw, index)
            for raw in match.group("selectors").split(",")
        )
        declarations = _parse_declarations(match.group("body"))
        if declarations:
            rules.append(StyleRule(selectors=selectors, declarations=declarations))
    return Stylesheet(rules=rules)
