# petstay/core/responses.py
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class ErrorType(Enum):
    NOT_FOUND = "NOT_FOUND"
    BAD_REQUEST = "BAD_REQUEST"
    SERVER_ERROR = "SERVER_ERROR"


@dataclass(frozen=True)
class DomainResponse(Generic[T]):
    """
    서비스 계층의 성공/실패 결과를 감싸는 응답 객체.
    실패 시 data는 None이며 message와 error_type으로 원인을 전달합니다.
    """
    success: bool
    data: Optional[T] = None
    message: Optional[str] = None
    error_type: Optional[ErrorType] = None

    @classmethod
    def ok(cls, data: T) -> "DomainResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def error(cls, message: str, error_type: ErrorType = ErrorType.BAD_REQUEST) -> "DomainResponse[T]":
        return cls(success=False, message=message, error_type=error_type)

    def is_success(self) -> bool:
        return self.success
