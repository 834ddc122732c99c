"""Extraction of word cards from verbformen.com dictionary pages.

The dictionary page carries no structured data, so the card is pieced
together from a handful of class-name fragments and tag shapes observed
on the page:

* the first ``<section>`` holds the whole entry;
* the element whose attributes mention ``vGrnd`` holds the word itself;
* the element whose attributes mention ``vStm`` holds the word-forms line,
  where ``<i>`` marks the stem and ``<u>`` marks the ending;
* the first ``<span lang="en">`` holds the English translation.

Matching is substring based and takes the first match only. Changing
either changes which words resolve.
"""

import logging
from collections.abc import Callable, Iterator

from bs4 import BeautifulSoup
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from karten.exceptions import AnchorMissingError, NotFoundError
from karten.models import Card, ColorClass, Syllable

logger = logging.getLogger(__name__)

ORIGIN_MARKER = "vGrnd"
FORMS_MARKER = "vStm"
TRANSLATION_LANG = "en"

NodePredicate = Callable[[PageElement], bool]


def parse_document(markup: str | bytes) -> BeautifulSoup:
    """Parse a dictionary page into a document tree.

    Args:
        markup: Raw HTML of the page

    Returns:
        Parsed document
    """
    return BeautifulSoup(markup, "html.parser")


# ---------------------------------------------------------------------------
# Tree traversal
# ---------------------------------------------------------------------------


def walk(root: PageElement | None) -> Iterator[PageElement]:
    """Yield ``root`` and all its descendants in document order.

    Uses an explicit stack, so deep pages cannot hit the recursion limit.
    """
    if root is None:
        return
    stack: list[PageElement] = [root]
    while stack:
        node = stack.pop()
        yield node
        if isinstance(node, Tag):
            stack.extend(reversed(node.contents))


def find_first(root: PageElement | None, predicate: NodePredicate) -> Tag | None:
    """Find the first node under ``root`` (inclusive) matching ``predicate``."""
    for node in walk(root):
        if predicate(node):
            return node  # type: ignore[return-value]
    return None


def is_text_node(node: PageElement) -> bool:
    """Check if a node is character data (comments and doctypes are not)."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def text_nodes(root: Tag | None) -> list[NavigableString]:
    """Collect the text nodes under ``root`` in document order.

    A missing root yields no text.
    """
    return [node for node in walk(root) if is_text_node(node)]  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Anchor predicates
# ---------------------------------------------------------------------------


def _attribute_values(tag: Tag) -> Iterator[str]:
    for value in tag.attrs.values():
        # Multi-valued attributes (class, rel, ...) come back as lists
        if isinstance(value, list):
            yield " ".join(value)
        else:
            yield str(value)


def has_attribute_marker(node: PageElement, marker: str) -> bool:
    """Check if any attribute value of an element contains ``marker``.

    This is plain substring containment, not a class-list lookup:
    ``marker="vStm"`` also matches ``class="rInf vStmX"``.
    """
    if not isinstance(node, Tag):
        return False
    return any(marker in value for value in _attribute_values(node))


def is_section(node: PageElement) -> bool:
    """Anchor of the whole entry."""
    return isinstance(node, Tag) and node.name == "section"


def is_origin_anchor(node: PageElement) -> bool:
    """Element holding the looked-up word."""
    return has_attribute_marker(node, ORIGIN_MARKER)


def is_forms_anchor(node: PageElement) -> bool:
    """Element holding the highlighted word-forms line."""
    return has_attribute_marker(node, FORMS_MARKER)


def is_translation_anchor(node: PageElement) -> bool:
    """English translation span."""
    return isinstance(node, Tag) and node.name == "span" and node.get("lang") == TRANSLATION_LANG


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------


def extract_origin(anchor: Tag) -> list[str]:
    """Collect the tokens of the looked-up phrase.

    Text nodes consisting of a single newline are layout noise and skipped;
    the others are trimmed.
    """
    container = find_first(anchor, is_origin_anchor)
    return [str(node).strip() for node in text_nodes(container) if str(node) != "\n"]


def classify_parent(tag_name: str | None) -> ColorClass | None:
    """Map the tag wrapping a word-forms fragment to its highlight.

    Returns:
        The color class, or None when the fragment must be dropped
    """
    match tag_name:
        case "p" | "b":
            return ColorClass.NEUTRAL
        case "i":
            return ColorClass.PRIMARY
        case "u":
            return ColorClass.SECONDARY
        case _:
            # Anything else (links, superscripts, ...) is not part of the forms line
            return None


def extract_forms(anchor: Tag) -> list[Syllable]:
    """Collect the highlighted fragments of the word-forms line."""
    container = find_first(anchor, is_forms_anchor)
    forms: list[Syllable] = []
    for node in text_nodes(container):
        value = str(node).replace("\n", " ")
        if value in ("", " "):
            continue

        parent_name = node.parent.name
        color_class = classify_parent(parent_name)
        if color_class is None:
            logger.debug(f"Dropping forms fragment {value!r} under <{parent_name}>")
            continue
        forms.append(Syllable(value, color_class))
    return forms


def last_non_newline_text(nodes: list[NavigableString]) -> str:
    """Return the content of the last text node that is not a bare newline.

    Later text nodes win over earlier ones. If there is none, the result
    is an empty string.
    """
    text = ""
    for node in nodes:
        if str(node) != "\n":
            text = str(node)
    return text


def extract_translation(anchor: Tag) -> list[str]:
    """Collect the translation tokens, one per line of the translation text.

    Each token is trimmed and loses one trailing comma. Empty tokens are kept.
    """
    container = find_first(anchor, is_translation_anchor)
    text = last_non_newline_text(text_nodes(container))
    return [line.strip().removesuffix(",") for line in text.split("\n")]


def extract_card(document: PageElement) -> Card:
    """Build a card from a parsed dictionary page.

    Args:
        document: Parsed page (or any subtree of it)

    Returns:
        Card with origin, translation and word forms

    Raises:
        AnchorMissingError: If the page has no <section> element
        NotFoundError: If the entry lacks origin, translation or forms
    """
    anchor = find_first(document, is_section)
    if anchor is None:
        raise AnchorMissingError("Page has no dictionary entry section")

    card = Card(
        origin=extract_origin(anchor),
        translation=extract_translation(anchor),
        forms=extract_forms(anchor),
    )
    logger.debug(
        f"Extracted origin={card.origin} translation={card.translation} "
        f"forms={len(card.forms)} syllables"
    )

    if card.is_empty():
        raise NotFoundError("Dictionary entry is incomplete")

    return card
