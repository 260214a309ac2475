import logging

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

import app.config.config as configs
from app.api.route import api_router as MainRouter
from app.model.error.error_response import ErrorResponse
from app.service.chat.chat import get_chat_service
from app.service.errors import ChatApiError, InternalError, ValidationError

logging.basicConfig(level=configs.LOG_LEVEL, format="[%(asctime)s] %(levelname)s %(name)s - %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=configs.SERVICE_TITLE, version=configs.SERVICE_VERSION)
app.include_router(router=MainRouter, prefix="/api")


def _error_response(error: ChatApiError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content=ErrorResponse(error=error.message).model_dump())


@app.exception_handler(ChatApiError)
async def chat_api_error_handler(request: Request, exc: ChatApiError) -> JSONResponse:
    logger.info("request failed path=%s status=%s error=%s", request.url.path, exc.status_code, exc.message)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("rejected request path=%s errors=%s", request.url.path, exc.errors())
    return _error_response(ValidationError("Invalid request body"))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled error path=%s", request.url.path, exc_info=exc)
    return _error_response(InternalError())


@app.on_event("startup")
def announce() -> None:
    logger.info("external chat api running on port %s", configs.PORT)
    logger.info("health check: http://localhost:%s/api/health", configs.PORT)


@app.on_event("shutdown")
def shutdown_event() -> None:
    # pending bot replies die with the process
    service_factory = app.dependency_overrides.get(get_chat_service, get_chat_service)
    service_factory().scheduler.close()


if __name__ == "__main__":
    uvicorn.run(app, host=configs.HOST, port=configs.PORT)
