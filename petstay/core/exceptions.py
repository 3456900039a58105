# petstay/core/exceptions.py
"""
저장소 계층에서 발생하는 예외 정의.

이 모듈의 예외는 호출자(라우트 등)가 직접 잡아서
전송 계층의 응답으로 변환하는 것을 전제로 합니다.
"""


class PersistenceError(Exception):
    """데이터 조회/저장 실패 또는 필요한 데이터가 없을 때 발생합니다."""


class ActivityLogNotFoundError(PersistenceError):
    """요청한 ID의 활동 로그가 저장소에 없을 때 발생합니다."""

    def __init__(self, log_id: str):
        self.log_id = log_id
        super().__init__(f"Activity log not found with ID: {log_id}")


class DataIntegrityError(PersistenceError):
    """저장된 로그의 분류 정보(request_type 등)가 누락되었을 때 발생합니다."""


class NoActivityLogsError(PersistenceError):
    """조회할 활동 로그가 저장소에 하나도 없을 때 발생합니다."""
