"""
Markup tree for plan fragments.
What it does:
- Parses a fragment wrapped in a synthetic <xml> root
- Keeps comments and text (including whitespace) as their own nodes
- Keeps attribute order as written

And, the main purpose:
A small closed set of node kinds the step compiler can walk without
touching the XML library directly.
"""


import xml.etree.ElementTree as ET
from typing import Iterator, List, Literal, Tuple, Union

from pydantic import BaseModel, Field

from plan_compiler.core.errors import MarkupSyntaxError

ROOT_TAG = "xml"


class TextNode(BaseModel):
    kind: Literal["text"] = "text"
    text: str


class CommentNode(BaseModel):
    kind: Literal["comment"] = "comment"
    text: str


class ElementNode(BaseModel):
    kind: Literal["element"] = "element"
    tag: str
    attributes: List[Tuple[str, str]] = Field(default_factory=list)
    children: List["Node"] = Field(default_factory=list)


Node = Union[ElementNode, TextNode, CommentNode]
ElementNode.model_rebuild()


def _leaf(el: ET.Element) -> Node:
    if el.tag is ET.Comment:
        return CommentNode(text=el.text or "")
    return ElementNode(tag=el.tag, attributes=list(el.attrib.items()))


def _convert(root: ET.Element) -> ElementNode:
    # explicit stack: model output can nest deeper than the recursion limit
    top = _leaf(root)
    stack = [(root, top)]
    while stack:
        el, node = stack.pop()
        if el.text:
            node.children.append(TextNode(text=el.text))
        for child in el:
            converted = _leaf(child)
            node.children.append(converted)
            if isinstance(converted, ElementNode):
                stack.append((child, converted))
            if child.tail:
                node.children.append(TextNode(text=child.tail))
    return top


def parse_fragment(fragment: str) -> ElementNode:
    """
    Parse `fragment` inside a synthetic root element.
    Raises MarkupSyntaxError if the result is not well-formed markup.
    """
    parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
    try:
        parser.feed(f"<{ROOT_TAG}>{fragment or ''}</{ROOT_TAG}>")
        root = parser.close()
    except ET.ParseError as e:
        line, column = e.position
        raise MarkupSyntaxError(str(e), line=line, column=column) from e
    return _convert(root)


def find_elements(root: ElementNode, tag: str) -> Iterator[ElementNode]:
    """Every descendant element named exactly `tag`, in document order."""
    stack = list(reversed(root.children))
    while stack:
        node = stack.pop()
        if isinstance(node, ElementNode):
            if node.tag == tag:
                yield node
            stack.extend(reversed(node.children))
