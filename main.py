import argparse
import logging
import sys

from tsukushi.errors import ParseError
from tsukushi.node import Node, comment, element, text
from tsukushi.parser import parse_document
from tsukushi.renderer import Renderer, RenderMode


def demo_tree() -> Node:
    return element("body", children=[
        element("div", children=[
            text("Some text content"),
            comment("A comment"),
        ]),
        element("p", {"id": "main", "class": "container"}),
    ])


def build_argparser() -> argparse.ArgumentParser:
    argparser = argparse.ArgumentParser(
        description="Parse an HTML document and print its node tree."
    )
    argparser.add_argument("path", nargs="?",
                           help="document to parse; stdin when omitted")
    argparser.add_argument("--markup", action="store_true",
                           help="print the tree serialized back to markup")
    argparser.add_argument("--demo", action="store_true",
                           help="print a hand-built sample tree")
    argparser.add_argument("--verbose", action="store_true")
    return argparser


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    render_mode = RenderMode.MARKUP if args.markup else RenderMode.TREE

    if args.demo:
        print(Renderer(node=demo_tree(), render_mode=render_mode).render())
        return 0

    if args.path:
        with open(args.path, encoding="utf-8") as f:
            source = f.read()
    else:
        source = sys.stdin.read()

    try:
        root = parse_document(source)
    except ParseError as e:
        name = args.path or "<stdin>"
        print(f"{name}:{e.line}:{e.column}: {e.message}", file=sys.stderr)
        return 1

    print(Renderer(node=root, render_mode=render_mode).render())
    return 0


if __name__ == "__main__":
    sys.exit(main())
