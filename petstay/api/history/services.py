# petstay/api/history/services.py
import logging
from datetime import datetime
from typing import List, Optional

from petstay.api.history.context import ContextBuilder
from petstay.api.history.dto import ActivityLogDTO
from petstay.api.history.repository import HistoryLogRepository
from petstay.api.history.transform import transform
from petstay.core.exceptions import ActivityLogNotFoundError, NoActivityLogsError, PersistenceError
from petstay.models.activity_log import ActivityLog, ActivityLogType

# 이 계층은 조회 실패를 직접 처리하지 않고 PersistenceError로 전달합니다.
# 호출하는 쪽(라우트 등)에서 잡아서 응답으로 변환해야 합니다.
class HistoryLogSearchService:
    """
    활동 로그 피드 조회 서비스.
    원본 로그 조회 → DataContext 생성 → DTO 변환 순서로 처리합니다.
    """
    def __init__(self, repository: HistoryLogRepository, context_builder: ContextBuilder):
        self.repository = repository
        self.context_builder = context_builder
        logging.info("HistoryLogSearchService initialized.")

    def _to_dto(self, log: ActivityLog) -> Optional[ActivityLogDTO]:
        context = self.context_builder.build(log)
        return transform(log, context)

    def _to_dtos(self, logs: List[ActivityLog]) -> List[ActivityLogDTO]:
        # 컨텍스트를 만들 수 없는 로그는 목록에서 조용히 제외
        dtos = [self._to_dto(log) for log in logs]
        return [dto for dto in dtos if dto is not None]

    def get_recent_log(self) -> Optional[ActivityLogDTO]:
        """가장 최근 로그를 반환합니다. 로그가 하나도 없으면 PersistenceError."""
        try:
            log = self.repository.search_recently()
            if log is None:
                raise NoActivityLogsError("No recent activity log found")
            return self._to_dto(log)
        except PersistenceError as e:
            logging.error(f"Error occurred while fetching activity logs: {e}")
            raise

    def get_all(self) -> List[ActivityLogDTO]:
        """모든 로그를 반환합니다. 저장된 로그가 없으면 PersistenceError."""
        try:
            logs = self.repository.search_all()
            if not logs:
                raise NoActivityLogsError("No activity logs found")
            return self._to_dtos(logs)
        except PersistenceError as e:
            logging.error(f"Error occurred while fetching activity logs: {e}")
            raise

    def search_by_id(self, log_id: str) -> Optional[ActivityLogDTO]:
        """
        ID로 로그를 조회합니다.
        ID가 없으면 ActivityLogNotFoundError, 로그는 있지만 컨텍스트를 만들 수 없으면 None.
        """
        try:
            log = self.repository.search_by_id(log_id)
            if log is None:
                raise ActivityLogNotFoundError(log_id)
            return self._to_dto(log)
        except PersistenceError as e:
            logging.error(f"Error occurred while fetching activity logs: {e}")
            raise

    def search_by_activity_type(self, activity_type: ActivityLogType) -> List[ActivityLogDTO]:
        """특정 분류의 로그를 반환합니다. 해당 분류 로그가 없으면 빈 리스트(예외 아님)."""
        try:
            logs = self.repository.search_by_activity_type(activity_type)
            if not logs:
                return []
            return self._to_dtos(logs)
        except PersistenceError as e:
            logging.error(f"Error occurred while fetching activity logs: {e}")
            raise

    # 날짜 기준 조회는 아직 지원하지 않습니다. 항상 None을 반환합니다.
    def get_by_date(self, time: datetime) -> Optional[List[ActivityLogDTO]]:
        return None

    def get_by_between_date(self, start: datetime, end: datetime) -> Optional[List[ActivityLogDTO]]:
        return None
