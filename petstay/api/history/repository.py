# petstay/api/history/repository.py
import logging
from typing import List, Optional
from firebase_admin import firestore

from petstay.core.exceptions import PersistenceError
from petstay.models.activity_log import ActivityLog, ActivityLogType
from petstay.services.firestore_service import (
    get_document, save_document, stream_documents, to_model
)

class HistoryLogRepository:
    """
    활동 로그 원본 문서의 저장/조회를 담당합니다.
    조회 결과가 없을 때의 처리(예외 여부)는 호출하는 서비스가 결정합니다.
    """
    def __init__(self, db=None, collection_name: str = 'activity_logs'):
        self.db = db or firestore.client()
        self.logs_ref = self.db.collection(collection_name)

    def _to_log(self, data) -> Optional[ActivityLog]:
        return to_model(ActivityLog.from_dict, data, 'activity_logs')

    def _to_logs(self, docs) -> List[ActivityLog]:
        # 형식이 잘못된 문서는 경고만 남기고 건너뜀 (단건 조회는 예외 전달)
        logs = []
        for data in docs:
            try:
                logs.append(self._to_log(data))
            except PersistenceError as e:
                logging.warning(f"Skipping activity log {data.get('log_id')}: {e}")
        return logs

    def search_recently(self) -> Optional[ActivityLog]:
        """가장 최근 로그 한 건을 반환합니다."""
        query = self.logs_ref.order_by('timestamp', direction=firestore.Query.DESCENDING).limit(1)
        docs = stream_documents(query)
        return self._to_log(docs[0]) if docs else None

    def search_all(self) -> List[ActivityLog]:
        """모든 로그를 최신순으로 반환합니다."""
        query = self.logs_ref.order_by('timestamp', direction=firestore.Query.DESCENDING)
        return self._to_logs(stream_documents(query))

    def search_by_id(self, log_id: str) -> Optional[ActivityLog]:
        return self._to_log(get_document(self.logs_ref, log_id))

    def search_by_activity_type(self, activity_type: ActivityLogType) -> List[ActivityLog]:
        """특정 분류의 로그를 최신순으로 반환합니다."""
        query = self.logs_ref.where('activity_type', '==', activity_type.value) \
                             .order_by('timestamp', direction=firestore.Query.DESCENDING)
        return self._to_logs(stream_documents(query))

    def save(self, log: ActivityLog) -> str:
        """로그를 저장하고 문서 ID를 반환합니다. 다른 도메인 서비스가 이벤트 기록 시 사용합니다."""
        log_id = save_document(self.logs_ref, log.log_id, log.to_dict())
        logging.info(f"Activity log recorded: {log.activity_type.value} (type_id: {log.type_id})")
        return log_id
