"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
Persistence errors (SQLAlchemyError and driver errors) are not wrapped here;
they propagate unchanged and surface as 500 responses.

Usage:
    from app.utils.exceptions import InvalidSortFieldError
    raise InvalidSortFieldError("nonexistentField")
"""

from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches.

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InvalidSortFieldError(BadRequestError):
    """정렬 프로퍼티가 결과 projection에 없을 때 발생하는 400 예외.

    Raised when a requested sort property does not exist on the member/team
    projection. Always raised before any query is executed.

    Args:
        property_name: 잘못된 정렬 프로퍼티 이름 (The rejected property name)
    """

    def __init__(self, property_name: str) -> None:
        self.property_name: str = property_name
        super().__init__(detail=f"Invalid sort property: {property_name}")
