"""CSS minification via cssutils."""

from __future__ import annotations

import logging

import cssutils

logger = logging.getLogger("domsnap.stylesheet")

# cssutils reports every unknown computed property; those are expected here.
cssutils.log.setLevel(logging.CRITICAL)


def _warn_unparsed(sheet: cssutils.css.CSSStyleSheet) -> None:
    for rule in sheet.cssRules:
        if rule.type == rule.UNKNOWN_RULE:
            logger.warning("cssutils could not interpret rule: %.80s", rule.cssText)


def minify_css(css: str) -> str:
    """Return *css* serialized with cssutils' minified preferences.

    Rules cssutils cannot interpret are logged and may be dropped.  Falls
    back to the input unchanged when nothing survives.
    """
    if not css.strip():
        return ""
    parser = cssutils.CSSParser(raiseExceptions=False, validate=False)
    sheet = parser.parseString(css)
    _warn_unparsed(sheet)
    cssutils.ser.prefs.useMinified()
    try:
        minified = sheet.cssText
    finally:
        cssutils.ser.prefs.useDefaults()
    if isinstance(minified, bytes):
        minified = minified.decode("utf-8")
    if not minified:
        logger.warning("CSS minification produced no output; keeping original")
        return css
    logger.debug("Minified CSS from %d to %d chars", len(css), len(minified))
    return minified
