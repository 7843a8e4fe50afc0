import logging
import sys
from dataclasses import dataclass
from typing import Callable

from tsukushi.errors import ParseError, ParseErrorKind
from tsukushi.node import AttributeMap, Comment, Node, Text, element


logger = logging.getLogger(__name__)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
QUOTES = ('"', "'")

# Three stack frames per nesting level, within the limit set below.
MAX_NESTING_DEPTH = 1000

# recursion limit increase for deep HTML trees
sys.setrecursionlimit(max(sys.getrecursionlimit(), 5000))


def is_tag_name_char(c: str) -> bool:
    return c.isascii() and c.isalnum()


@dataclass
class Parser:
    """
    Single-pass recursive descent parser over a complete document.

    `pos` only moves forward. Each parse needs its own instance.
    """
    input: str
    pos: int = 0
    depth: int = 0

    def error(self, kind: ParseErrorKind, detail: str = "",
              position: int | None = None) -> ParseError:
        return ParseError(
            kind,
            self.input,
            self.pos if position is None else position,
            detail
        )

    def eof(self) -> bool:
        return self.pos >= len(self.input)

    def next_char(self) -> str:
        if self.eof():
            raise self.error(ParseErrorKind.UNEXPECTED_EOF)
        return self.input[self.pos]

    def starts_with(self, prefix: str) -> bool:
        return self.input.startswith(prefix, self.pos)

    def consume_char(self) -> str:
        c = self.next_char()
        self.pos += 1
        return c

    def consume_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        while not self.eof() and predicate(self.input[self.pos]):
            self.pos += 1
        return self.input[start:self.pos]

    def consume_whitespace(self) -> None:
        self.consume_while(str.isspace)

    def expect(self, expected: str, kind: ParseErrorKind) -> None:
        position = self.pos
        c = self.consume_char()
        if c != expected:
            raise self.error(kind, f"found {c!r}", position)

    def parse_tag_name(self) -> str:
        return self.consume_while(is_tag_name_char)

    def parse_attr_value(self) -> str:
        position = self.pos
        open_quote = self.consume_char()
        if open_quote not in QUOTES:
            raise self.error(
                ParseErrorKind.EXPECTED_QUOTE, f"found {open_quote!r}", position
            )
        value = self.consume_while(lambda c: c != open_quote)
        if self.eof():
            raise self.error(ParseErrorKind.UNTERMINATED_ATTR_VALUE,
                             position=position)
        self.consume_char()
        return value

    def parse_attr(self) -> tuple[str, str]:
        position = self.pos
        name = self.parse_tag_name()
        if not name:
            # Report what stopped the name scan, EOF included.
            found = self.next_char()
            raise self.error(
                ParseErrorKind.EMPTY_ATTRIBUTE_NAME, f"found {found!r}", position
            )
        self.expect("=", ParseErrorKind.EXPECTED_EQUALS)
        value = self.parse_attr_value()
        return (name, value)

    def parse_attributes(self) -> AttributeMap:
        attributes: AttributeMap = {}
        while True:
            self.consume_whitespace()
            if self.next_char() == ">":
                break
            name, value = self.parse_attr()
            attributes[name] = value
        return attributes

    def parse_element(self) -> Node:
        position = self.pos
        self.expect("<", ParseErrorKind.EXPECTED_LT)
        tag = self.parse_tag_name()
        if not tag:
            raise self.error(ParseErrorKind.EMPTY_TAG_NAME)
        attributes = self.parse_attributes()
        self.expect(">", ParseErrorKind.EXPECTED_GT)

        if self.depth >= MAX_NESTING_DEPTH:
            raise self.error(
                ParseErrorKind.NESTING_TOO_DEEP,
                f"more than {MAX_NESTING_DEPTH} levels",
                position
            )
        self.depth += 1
        children = self.parse_nodes()
        self.depth -= 1

        self.expect("<", ParseErrorKind.EXPECTED_LT)
        self.expect("/", ParseErrorKind.EXPECTED_SLASH)
        position = self.pos
        closing_tag = self.parse_tag_name()
        if closing_tag != tag:
            raise self.error(
                ParseErrorKind.MISMATCHED_CLOSING_TAG,
                f"expected </{tag}>, found </{closing_tag}>",
                position
            )
        self.expect(">", ParseErrorKind.EXPECTED_CLOSE_GT)

        return element(tag, attributes, children)

    def parse_comment(self) -> Node:
        position = self.pos
        self.pos += len(COMMENT_OPEN)
        end = self.input.find(COMMENT_CLOSE, self.pos)
        if end == -1:
            raise self.error(ParseErrorKind.UNTERMINATED_COMMENT,
                             position=position)
        content = self.input[self.pos:end]
        self.pos = end + len(COMMENT_CLOSE)
        return Comment(text=content)

    def parse_text(self) -> Node:
        return Text(text=self.consume_while(lambda c: c != "<"))

    def parse_node(self) -> Node:
        if self.starts_with(COMMENT_OPEN):
            return self.parse_comment()
        if self.next_char() == "<":
            return self.parse_element()
        return self.parse_text()

    def parse_nodes(self) -> list[Node]:
        nodes: list[Node] = []
        while True:
            self.consume_whitespace()
            if self.eof() or self.starts_with("</"):
                break
            nodes.append(self.parse_node())
        return nodes


def parse_document(source: str) -> Node:
    """
    Parse a whole document into a single root node.

    A document with exactly one top-level node returns that node. Otherwise
    the top-level nodes are wrapped in a synthesized <html> element.

    Raises:
        ParseError: If the document is not well-formed.
    """
    logger.debug("Parsing document of %d characters", len(source))
    parser = Parser(input=source)
    try:
        nodes = parser.parse_nodes()
        if not parser.eof():
            # Only a closing tag stops the top level before the end.
            raise parser.error(ParseErrorKind.UNEXPECTED_CLOSING_TAG)
    except RecursionError:
        # The caller was already deep in its own stack.
        error = parser.error(ParseErrorKind.NESTING_TOO_DEEP)
        logger.debug("Parse failed: %s at offset %d", error.kind.name, error.position)
        raise error from None
    except ParseError as e:
        logger.debug("Parse failed: %s at offset %d", e.kind.name, e.position)
        raise

    if len(nodes) == 1:
        return nodes[0]
    logger.debug("Wrapping %d top-level nodes in <html>", len(nodes))
    return element("html", {}, nodes)
