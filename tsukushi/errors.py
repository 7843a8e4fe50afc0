from enum import Enum


class ParseErrorKind(Enum):
    UNEXPECTED_EOF = "unexpected end of input"
    EXPECTED_LT = "expected '<'"
    EXPECTED_GT = "expected '>'"
    EXPECTED_EQUALS = "expected '=' after attribute name"
    EXPECTED_QUOTE = "expected a quoted attribute value"
    EXPECTED_SLASH = "expected '/' in closing tag"
    EXPECTED_CLOSE_GT = "expected '>' at the end of closing tag"
    UNTERMINATED_ATTR_VALUE = "unterminated attribute value"
    UNTERMINATED_COMMENT = "unterminated comment"
    MISMATCHED_CLOSING_TAG = "closing tag does not match opening tag"
    UNEXPECTED_CLOSING_TAG = "closing tag without a matching opening tag"
    EMPTY_TAG_NAME = "empty tag name"
    EMPTY_ATTRIBUTE_NAME = "empty attribute name"
    NESTING_TOO_DEEP = "elements nested too deeply"


class ParseError(Exception):
    """
    Raised when the input is not well-formed markup.

    Carries the kind of violation and where it was detected: the character
    offset into the input, plus the 1-based line and column of that offset.
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        source: str,
        position: int,
        detail: str = ""
    ) -> None:
        self.kind = kind
        self.position = position
        consumed = source[:position]
        self.line = consumed.count("\n") + 1
        self.column = position - (consumed.rfind("\n") + 1) + 1
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        message = self.kind.value
        if self.detail:
            message += f" ({self.detail})"
        return f"{message} at line {self.line}, column {self.column}"
