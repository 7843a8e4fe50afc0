from dataclasses import dataclass, field


AttributeMap = dict[str, str]


@dataclass
class Node:
    children: list['Node'] = field(default_factory=list)

    def id(self) -> str | None:
        return None

    def classes(self) -> set[str]:
        return set()


@dataclass
class Element(Node):
    tag: str = ""
    attributes: AttributeMap = field(default_factory=dict)

    def __repr__(self) -> str:
        if not self.attributes:
            return f"<{self.tag}>"
        return f"<{self.tag} {self.attribute_str}>"

    @property
    def attribute_str(self) -> str:
        attrs: list[str] = []
        for key, value in self.attributes.items():
            quote = "'" if '"' in value else '"'
            attrs.append(f'{key}={quote}{value}{quote}')
        return " ".join(attrs)

    def id(self) -> str | None:
        return self.attributes.get("id")

    def classes(self) -> set[str]:
        """
        Class tokens of the "class" attribute.

        Runs of spaces do not produce empty tokens.
        """
        class_list = self.attributes.get("class")
        if class_list is None:
            return set()
        return {name for name in class_list.split(" ") if name}


@dataclass
class Text(Node):
    text: str = ""

    def __repr__(self) -> str:
        return repr(self.text)


@dataclass
class Comment(Node):
    text: str = ""

    def __repr__(self) -> str:
        return f"<!--{self.text}-->"


def text(content: str) -> Text:
    return Text(text=content)


def comment(content: str) -> Comment:
    return Comment(text=content)


def element(
    tag: str,
    attributes: AttributeMap | None = None,
    children: list[Node] | None = None
) -> Element:
    return Element(
        tag=tag,
        attributes=dict(attributes or {}),
        children=list(children or [])
    )
