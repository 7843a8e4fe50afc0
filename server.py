import logging
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.concurrency import run_in_threadpool

from tsukushi.errors import ParseError
from tsukushi.node import Comment, Element, Node, Text
from tsukushi.parser import parse_document
from tsukushi.renderer import Renderer, RenderMode

logger = logging.getLogger(__name__)

app = FastAPI(title="tsukushi HTML parser")


def node_to_json(node: Node) -> dict[str, Any]:
    if isinstance(node, Element):
        return {
            "type": "element",
            "tag": node.tag,
            "attributes": dict(node.attributes),
            "children": [node_to_json(child) for child in node.children],
        }
    elif isinstance(node, Text):
        return {"type": "text", "text": node.text}
    elif isinstance(node, Comment):
        return {"type": "comment", "text": node.text}
    raise TypeError(f"Unsupported node type: {type(node).__name__}")


@app.exception_handler(ParseError)
async def parse_error_handler(request: Request, exc: ParseError) -> JSONResponse:
    logger.info("Rejected document: %s", exc.message)
    return JSONResponse(
        {
            "error": exc.kind.name,
            "message": exc.message,
            "position": exc.position,
            "line": exc.line,
            "column": exc.column,
        },
        status_code=400,
    )


async def read_document(request: Request) -> str:
    body = await request.body()
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Document must be UTF-8")


def parse_to_json(source: str) -> dict[str, Any]:
    return node_to_json(parse_document(source))


def render_document(source: str, render_mode: RenderMode) -> str:
    root = parse_document(source)
    return Renderer(node=root, render_mode=render_mode).render()


@app.post("/parse")
async def parse_endpoint(request: Request) -> JSONResponse:
    source = await read_document(request)
    tree = await run_in_threadpool(parse_to_json, source)
    return JSONResponse(tree)


@app.post("/render")
async def render_endpoint(request: Request, mode: str = "tree") -> PlainTextResponse:
    if mode == "markup":
        render_mode = RenderMode.MARKUP
    elif mode == "tree":
        render_mode = RenderMode.TREE
    else:
        return PlainTextResponse(f"Unsupported render mode: {mode}", status_code=400)
    source = await read_document(request)
    rendered = await run_in_threadpool(render_document, source, render_mode)
    return PlainTextResponse(rendered)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)

# Usage:
# uv run server.py
# curl -X POST --data '<div id="main"><p>Hi</p></div>' localhost:8000/parse
