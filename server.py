import os
from pathlib import Path

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse

from kumihan.converter import convert
from kumihan.errors import MarkupSyntaxError

PAGE_SUFFIX = ".kh"

app = FastAPI(title="Kumihan Preview Server")

# Allow cross-origin requests so editors and previews can post markup freely.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def pages_dir() -> Path:
    return Path(os.environ.get("KUMIHAN_PAGES_DIR", "pages"))


def syntax_error_response(exc: MarkupSyntaxError) -> JSONResponse:
    return JSONResponse(
        {"error": exc.reason, "line": exc.line_number, "content": exc.content},
        status_code=422,
    )


def decode_error_response(exc: UnicodeDecodeError) -> JSONResponse:
    return JSONResponse(
        {"error": f"source is not valid UTF-8: {exc.reason} at byte {exc.start}"},
        status_code=400,
    )


@app.post("/render")
async def render_endpoint(request: Request):
    try:
        source = (await request.body()).decode("utf-8")
    except UnicodeDecodeError as exc:
        return decode_error_response(exc)
    try:
        html = convert(source)
    except MarkupSyntaxError as exc:
        return syntax_error_response(exc)
    return PlainTextResponse(html)


@app.get("/pages/{name}")
async def page_endpoint(name: str):
    if name in ("", ".", "..") or "/" in name or "\\" in name:
        raise HTTPException(status_code=404, detail="Page not found")
    path = pages_dir() / f"{name}{PAGE_SUFFIX}"
    if not path.is_file():
        raise HTTPException(status_code=404, detail="Page not found")
    try:
        html = convert(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        return decode_error_response(exc)
    except MarkupSyntaxError as exc:
        return syntax_error_response(exc)
    return HTMLResponse(html)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)

# Usage:
# KUMIHAN_PAGES_DIR=pages uv run server.py
