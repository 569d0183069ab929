from uncss.css.minify import minify_css
from uncss.css.parser import CONDITIONAL_GROUP_KEYWORDS, parse_css
from uncss.css.serializer import serialize_stylesheet

__all__ = ["CONDITIONAL_GROUP_KEYWORDS", "minify_css", "parse_css", "serialize_stylesheet"]
