"""Playwright binding: capture a live element's tree and computed style."""

from __future__ import annotations

import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from domsnap.browser.payload import build_tree
from domsnap.errors import CaptureError
from domsnap.model.node import Element

logger = logging.getLogger("domsnap.browser")

# Walks the subtree in the page and dumps tags, attributes, text and the
# computed style of every element plus its ::before / ::after.  Pseudo styles
# with no content are skipped here; visibility is decided in Python.
CAPTURE_SCRIPT = """
(selector) => {
    const root = document.querySelector(selector);
    if (!root) return null;

    const styleOf = (el, pseudo) => {
        const cs = window.getComputedStyle(el, pseudo);
        const pairs = [];
        for (let i = 0; i < cs.length; i++) {
            const prop = cs[i];
            pairs.push([prop, cs.getPropertyValue(prop)]);
        }
        return pairs;
    };

    const pseudoOf = (el, pseudo) => {
        const content = window.getComputedStyle(el, pseudo).content;
        if (!content || content === 'none' || content === 'normal') return null;
        return styleOf(el, pseudo);
    };

    const walk = (node) => {
        if (node.nodeType === Node.TEXT_NODE) return { text: node.data };
        if (node.nodeType !== Node.ELEMENT_NODE) return null;
        const attrs = [];
        for (const attr of node.attributes) attrs.push([attr.name, attr.value]);
        const children = [];
        for (const child of node.childNodes) {
            const captured = walk(child);
            if (captured) children.push(captured);
        }
        return {
            tag: node.localName,
            ns: node.namespaceURI,
            attrs,
            style: styleOf(node, null),
            before: pseudoOf(node, '::before'),
            after: pseudoOf(node, '::after'),
            children,
        };
    };

    const ancestors = [];
    for (let p = root.parentElement; p; p = p.parentElement) {
        ancestors.push({
            tag: p.localName,
            ns: p.namespaceURI,
            background: window.getComputedStyle(p).backgroundColor,
        });
    }
    return { root: walk(root), ancestors };
}
"""


def capture_element(page: Page, selector: str) -> Element:
    """Capture the first element matching *selector* on an open *page*."""
    try:
        payload = page.evaluate(CAPTURE_SCRIPT, selector)
    except PlaywrightError as exc:
        raise CaptureError(f"Capture script failed: {exc}", selector=selector) from exc
    if payload is None:
        raise CaptureError(f"No element matches selector {selector!r}", selector=selector)
    element = build_tree(payload)
    logger.info("Captured <%s> for selector %r", element.tag, selector)
    return element


def capture_url(
    url: str,
    selector: str,
    *,
    headless: bool = True,
    timeout_ms: int = 30_000,
    wait_until: str = "load",
) -> Element:
    """Open *url* in Chromium and capture the element matching *selector*."""
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        try:
            page = browser.new_page()
            logger.info("Loading %s", url)
            try:
                page.goto(url, wait_until=wait_until, timeout=timeout_ms)
            except PlaywrightError as exc:
                raise CaptureError(f"Failed to load {url}: {exc}", url=url) from exc
            return capture_element(page, selector)
        finally:
            browser.close()
