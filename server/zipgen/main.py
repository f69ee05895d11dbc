import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from zipgen.api.generate import router as generate_router
from zipgen.api.site import router as site_router
from zipgen.utils import config

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Project Template Zip Generator")
app.include_router(site_router)
app.include_router(generate_router)
app.mount("/static", StaticFiles(directory=config.STATIC_DIR, check_dir=False), name="static")


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("rejected request to %s: invalid body", request.url.path)
    # submitted values (`input`, `ctx`) are never echoed back
    detail = [
        {"loc": err.get("loc"), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request body", "detail": jsonable_encoder(detail)},
    )


def run():
    logger.info("server starting at http://%s:%d", config.HOST, config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
