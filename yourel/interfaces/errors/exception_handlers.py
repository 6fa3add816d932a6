import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from yourel.application.errors.exceptions import AppException
from yourel.interfaces.schemas import Response

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """统一处理Yourel中的异常，所有错误都以Response结构返回"""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request, exc: AppException
    ) -> JSONResponse:
        """自定义应用异常处理器，捕获AppException并返回标准化响应"""
        logger.error(f"App exception: {exc.msg}")

        return JSONResponse(
            status_code=exc.status_code,
            content=Response(code=exc.code, msg=exc.msg, data=exc.data or {}).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """请求参数校验失败(如未知的平台过滤)时返回422，并附带出错字段"""
        errors = jsonable_encoder(exc.errors())
        logger.warning(f"Request validation failed: {request.url.path}")

        return JSONResponse(
            status_code=422,
            content=Response(
                code=422, msg="Invalid request parameters", data={"errors": errors}
            ).model_dump(),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        """HTTP异常处理器，捕获HTTPException并返回标准化响应"""
        logger.error(f"HTTP exception: {exc.detail}")

        return JSONResponse(
            status_code=exc.status_code,
            content=Response(code=exc.status_code, msg=exc.detail, data={}).model_dump(),
        )

    @app.exception_handler(Exception)
    async def exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """通用异常处理器，捕获所有未处理的异常并返回标准化响应, 状态码500"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content=Response(code=500, msg="Internal Server Error", data={}).model_dump(),
        )
