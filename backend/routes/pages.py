"""Landing page and dashboard."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

WEB_DIR = Path(__file__).resolve().parent.parent / "web"

router = APIRouter(tags=["Pages"], include_in_schema=False)


@router.get("/")
async def landing():
    return FileResponse(WEB_DIR / "index.html", media_type="text/html")


@router.get("/dashboard")
async def dashboard():
    return FileResponse(WEB_DIR / "dashboard.html", media_type="text/html")
