"""Application object for the success responder.

Run it with the bundled entry point (`success-responder`) or point any ASGI
server at `responder.main:app`.
"""

import sys

from fastapi import FastAPI
from loguru import logger

from responder.api import router
from responder.settings import settings_model

logger.remove()
logger.add(sys.stderr, format="{time:YYYY-MM-DD at HH:mm:ss} | {level} | {message}", level=settings_model.log_level)

app = FastAPI(docs_url=None, redoc_url=None, openapi_url=None)

app.include_router(router)
