from dataclasses import dataclass
from enum import Enum

from tsukushi.node import Comment, Element, Node, Text


class RenderMode(Enum):
    TREE = 1
    MARKUP = 2


def render_tree(node: Node, indent: int = 2) -> str:
    """
    Render a tree for debugging, one node per line.

    Each level of nesting is indented by `indent` spaces. Elements are shown
    with their opening and closing tags, comments as <!-- ... -->.
    """
    lines: list[str] = []
    _render_tree_lines(node, 0, indent, lines)
    return "\n".join(lines)


def _render_tree_lines(
    node: Node, depth: int, indent: int, lines: list[str]
) -> None:
    prefix = " " * (depth * indent)
    if isinstance(node, Element):
        lines.append(f"{prefix}{node!r}")
        for child in node.children:
            _render_tree_lines(child, depth + 1, indent, lines)
        lines.append(f"{prefix}</{node.tag}>")
    elif isinstance(node, Text):
        lines.append(f"{prefix}{node.text}")
    elif isinstance(node, Comment):
        lines.append(f"{prefix}<!-- {node.text} -->")
    else:
        raise TypeError(f"Unsupported node type: {type(node).__name__}")


def to_html(node: Node) -> str:
    """
    Serialize a tree back into markup accepted by parse_document.

    Text is written as is, so parsing the result gives back an equal tree
    only when text nodes neither contain "<" nor start with whitespace.

    Raises:
        ValueError: If an attribute value contains both quote characters.
    """
    if isinstance(node, Element):
        for name, value in node.attributes.items():
            if '"' in value and "'" in value:
                raise ValueError(
                    f"Attribute {name!r} of <{node.tag}> cannot be quoted: {value!r}"
                )
        inner: list[str] = []
        for child in node.children:
            inner.append(to_html(child))
        opening = f"{node.tag} {node.attribute_str}" \
            if node.attributes else node.tag
        content = "".join(inner)
        return f"<{opening}>{content}</{node.tag}>"
    elif isinstance(node, Text):
        return node.text
    elif isinstance(node, Comment):
        return f"<!--{node.text}-->"
    else:
        raise TypeError(f"Unsupported node type: {type(node).__name__}")


def print_tree(node: Node, indent: int = 2) -> None:
    print(render_tree(node, indent))


@dataclass
class Renderer:
    node: Node
    render_mode: RenderMode = RenderMode.TREE
    indent: int = 2

    def render(self) -> str:
        if self.render_mode == RenderMode.TREE:
            return render_tree(self.node, self.indent)
        elif self.render_mode == RenderMode.MARKUP:
            return to_html(self.node)
        else:
            raise ValueError("Unsupported render mode")
