# zipgen/api/generate.py
import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from zipgen.core.errors import MissingFileError, ZipgenError
from zipgen.core.generator import build_archive
from zipgen.core.variants import CLIENT, SERVER, Variant
from zipgen.models import RenderContext, UserInfo
from zipgen.utils.file_helpers import content_disposition, download_filename

logger = logging.getLogger(__name__)

router = APIRouter()


async def _generate_zip(variant: Variant, user_info: UserInfo) -> Response:
    context = RenderContext.from_user_info(user_info)
    try:
        data = await run_in_threadpool(build_archive, variant, context)
    except MissingFileError as e:
        logger.error("%s zip for user %r: missing file %s", variant.name, context.username, e.path)
        return _failure(variant)
    except (ZipgenError, OSError) as e:
        logger.exception("%s zip creation failed for user %r: %s", variant.name, context.username, e)
        return _failure(variant)

    filename = download_filename(context.project_name, variant.filename_suffix)
    return Response(
        content=data,
        media_type="application/zip",
        headers={"Content-Disposition": content_disposition(filename)},
    )


def _failure(variant: Variant) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={"error": f"Failed to create {variant.name} zip file"},
    )


@router.post("/generate-server-zip")
async def generate_server_zip(user_info: UserInfo):
    """Server template bundle: LICENSE, pyproject.toml and README.md over zero.zip."""
    return await _generate_zip(SERVER, user_info)


@router.post("/generate-client-zip")
async def generate_client_zip(user_info: UserInfo):
    """Client template bundle: LICENSE, package.json and README.md over zero-client.zip."""
    return await _generate_zip(CLIENT, user_info)
