# zenith_blog/routes/pages.py
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter(tags=["pages"])


@router.get("/post", include_in_schema=False)
async def post_page() -> FileResponse:
    return FileResponse(STATIC_DIR / "post.html")


@router.get("/editor", include_in_schema=False)
async def editor_page() -> FileResponse:
    return FileResponse(STATIC_DIR / "editor.html")
