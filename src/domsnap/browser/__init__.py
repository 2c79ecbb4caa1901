"""Browser binding.  Importing :mod:`domsnap.browser.capture` requires Playwright."""

from domsnap.browser.payload import build_tree

__all__ = ["build_tree"]
