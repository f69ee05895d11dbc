from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse

from zipgen.utils import config

router = APIRouter()


@router.get("/")
async def index():
    """The project form page."""
    page = config.STATIC_DIR / "index.html"
    if not page.is_file():
        return JSONResponse(status_code=404, content={"error": "index page not found"})
    return FileResponse(page, media_type="text/html; charset=utf-8")


@router.get("/health")
async def health():
    return {"status": "healthy", "service": config.SERVICE_NAME}
