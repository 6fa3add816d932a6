from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Response(BaseModel, Generic[T]):
    """Yourel API统一响应结构，code与HTTP状态码保持一致，200表示成功"""

    code: int = 200
    msg: str = "success"
    data: Optional[T] = None

    @staticmethod
    def success(data: Optional[T] = None, msg: str = "success") -> "Response[T]":
        """创建一个表示成功的响应对象"""
        return Response[T](code=200, msg=msg, data=data)

    @staticmethod
    def fail(
        code: int = 400, msg: str = "fail", data: Optional[Any] = None
    ) -> "Response[Any]":
        """创建一个表示失败的响应对象"""
        return Response[Any](code=code, msg=msg, data=data)
