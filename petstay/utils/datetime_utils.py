# petstay/utils/datetime_utils.py
"""
활동 로그와 예약 문서에서 공통으로 쓰는 시간 처리 유틸리티

- 백엔드는 모든 시간을 UTC timezone-aware datetime으로 다룹니다.
- Firestore에서 읽은 Timestamp와 문자열 시간 값을 같은 형태로 정규화합니다.
"""

import logging
from datetime import datetime, date, timezone, time
from typing import Any, Optional
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        ISO 포맷 문자열을 UTC datetime 객체로 파싱

        지원 포맷:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+09:00
        - 2024-01-15T10:30:00
        """
        if not iso_string:
            raise ValueError("빈 문자열은 파싱할 수 없습니다")
        try:
            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'
            dt = dateutil_parser.isoparse(iso_string)
        except (ValueError, OverflowError) as e:
            logger.error(f"ISO datetime 파싱 실패: {iso_string} - {e}")
            raise ValueError(f"잘못된 ISO 날짜 형식입니다: {iso_string}")

        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)

    @staticmethod
    def for_firestore(obj: Any) -> Any:
        """
        Firestore 저장을 위해 객체의 날짜/시간 필드를 변환

        변환 규칙:
        - date -> datetime (00:00:00 UTC)
        - timezone-naive datetime -> timezone-aware datetime (UTC)
        - dict/list 내부 재귀적 변환
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        if isinstance(obj, date):
            return datetime.combine(obj, time.min).replace(tzinfo=timezone.utc)
        if isinstance(obj, dict):
            return {k: DateTimeUtils.for_firestore(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [DateTimeUtils.for_firestore(item) for item in obj]
        return obj

    @staticmethod
    def from_firestore(obj: Any) -> Any:
        """
        Firestore에서 읽은 데이터의 datetime 필드를 UTC datetime으로 변환

        Firestore의 DatetimeWithNanoseconds는 datetime의 하위 클래스이므로
        datetime 분기에서 함께 처리됩니다.
        """
        if isinstance(obj, datetime):
            if obj.tzinfo is None:
                return obj.replace(tzinfo=timezone.utc)
            return obj.astimezone(timezone.utc)
        if isinstance(obj, dict):
            return {k: DateTimeUtils.from_firestore(v) for k, v in obj.items()}
        if isinstance(obj, list):
            return [DateTimeUtils.from_firestore(item) for item in obj]
        return obj

    @staticmethod
    def to_utc_datetime(value: Any, field_name: str = "datetime") -> Optional[datetime]:
        """
        문서 필드 값(문자열, datetime, None)을 UTC datetime으로 변환합니다.
        None은 그대로 None을 반환하고, 해석할 수 없는 값은 ValueError를 발생시킵니다.
        """
        if value is None:
            return None
        if isinstance(value, str):
            return DateTimeUtils.parse_iso_datetime(value)
        if isinstance(value, datetime):
            return DateTimeUtils.from_firestore(value)
        raise ValueError(f"{field_name}은 문자열 또는 datetime 객체여야 합니다: {type(value)}")
