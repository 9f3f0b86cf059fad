# pyconfig_resolver/config/element.py
from __future__ import annotations
import html
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

__all__ = [
    "CONFIG_TAG", "ConfigElement", "getAttribute", "htmlDecode",
    "findConfigElements", "findConfigElement",
]

CONFIG_TAG = "py-config"



@dataclass(frozen=True, slots=True)
class ConfigElement:
    # Raw attributes as written in the page (e.g. {"type": "json", "src": "./config.json"})
    attributes: Mapping[str, str] = field(default_factory=dict)
    # Entity-encoded inner markup, exactly as the page carries it
    innerHTML: str = ""
    tagName: str = CONFIG_TAG



def getAttribute(el: ConfigElement, attr: str) -> str | None:
    """Attribute value, or None when it is missing or empty."""
    value = el.attributes.get(attr)
    return value if value else None



def htmlDecode(text: str) -> str:
    """Resolve HTML character references (&lt; &amp; &#34; ...) in element content."""
    return html.unescape(text)



def findConfigElements(markup: str) -> list[ConfigElement]:
    """All <py-config> elements of an HTML document, in document order."""
    soup = BeautifulSoup(markup, "html.parser")
    elements: list[ConfigElement] = []
    for tag in soup.find_all(CONFIG_TAG):
        attributes = {
            str(key): " ".join(value) if isinstance(value, list) else str(value)
            for key, value in tag.attrs.items()
        }
        elements.append(ConfigElement(attributes=attributes, innerHTML=tag.decode_contents()))
    return elements



def findConfigElement(markup: str) -> ConfigElement | None:
    """
    The first <py-config> of the page, or None when there is none.
    Extra elements are ignored with a warning.
    """
    elements = findConfigElements(markup)
    if not elements:
        return None
    if len(elements) > 1:
        logger.warning(
            "Multiple <%s> tags detected. Only the first is going to be parsed, all the others will be ignored",
            CONFIG_TAG,
        )
    return elements[0]
