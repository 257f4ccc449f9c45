from datetime import UTC, datetime
from typing import Any

from app.summary.exceptions import SummaryError


def _envelope(
    *, success: bool, message: str, data: Any, status_code: int
) -> dict[str, Any]:
    return {
        "success": success,
        "message": message,
        "data": data,
        "statusCode": status_code,
        "timestamp": datetime.now(UTC).isoformat(),
    }


def success_response(
    data: Any = None, message: str = "Operation successful", status_code: int = 200
) -> dict[str, Any]:
    return _envelope(success=True, message=message, data=data, status_code=status_code)


def error_response(error: SummaryError) -> dict[str, Any]:
    return _envelope(
        success=False,
        message=error.message,
        data={"code": error.code},
        status_code=error.status_code,
    )
