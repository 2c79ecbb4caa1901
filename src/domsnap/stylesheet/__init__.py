from domsnap.stylesheet.minify import minify_css
from domsnap.stylesheet.model import Selector, StyleRule, Stylesheet
from domsnap.stylesheet.parser import parse_stylesheet

__all__ = ["minify_css", "parse_stylesheet", "Stylesheet", "StyleRule", "Selector"]
