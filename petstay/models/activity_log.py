# petstay/models/activity_log.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any, Union
import logging

from petstay.utils.datetime_utils import DateTimeUtils

class ActivityLogType(Enum):
    """활동 로그의 분류. display_name은 피드에 노출되는 이름입니다."""
    BOARDING_MANAGEMENT = ("BOARDING_MANAGEMENT", "Boarding Management")
    PET_OWNER_MANAGEMENT = ("PET_OWNER_MANAGEMENT", "Pet Owner Management")
    PET_MANAGEMENT = ("PET_MANAGEMENT", "Pet Management")
    REQUEST_MANAGEMENT = ("REQUEST_MANAGEMENT", "Request Management")
    MEDIA_MANAGEMENT = ("MEDIA_MANAGEMENT", "Media Management")

    def __new__(cls, code: str, display_name: str):
        member = object.__new__(cls)
        member._value_ = code
        member.display_name = display_name
        return member

class RequestType(Enum):
    """고객 요청의 세부 유형. REQUEST_MANAGEMENT 로그에서만 의미가 있습니다."""
    BOARDING_EXTENSION = "BOARDING_EXTENSION"
    GROOMING_SERVICE = "GROOMING_SERVICE"
    PHOTO_REQUEST = "PHOTO_REQUEST"
    VIDEO_REQUEST = "VIDEO_REQUEST"
    GENERAL_INQUIRY = "GENERAL_INQUIRY"

# type_id가 가리키는 대상. 로그 분류마다 하나의 대상 타입만 허용됩니다.
@dataclass(frozen=True)
class BoardingTarget:
    boarding_id: str

@dataclass(frozen=True)
class OwnerTarget:
    owner_id: str

@dataclass(frozen=True)
class PetTarget:
    pet_id: str

@dataclass(frozen=True)
class RequestTarget:
    request_id: str

LogTarget = Union[BoardingTarget, OwnerTarget, PetTarget, RequestTarget]

_TARGET_BY_TYPE = {
    ActivityLogType.BOARDING_MANAGEMENT: BoardingTarget,
    ActivityLogType.PET_OWNER_MANAGEMENT: OwnerTarget,
    ActivityLogType.PET_MANAGEMENT: PetTarget,
    ActivityLogType.REQUEST_MANAGEMENT: RequestTarget,
}

@dataclass
class ActivityLog:
    """
    Firestore 'activity_logs' 컬렉션 문서 구조.
    비즈니스 이벤트(예약 생성, 반려동물 등록, 고객 요청 등) 한 건을 기록하며,
    type_id는 activity_type에 따라 서로 다른 엔티티를 가리킵니다.
    """
    log_id: str
    activity_type: ActivityLogType
    timestamp: datetime
    type_id: Optional[str] = None
    request_type: Optional[RequestType] = None
    performed_by: Optional[str] = None
    description: Optional[str] = None

    def target(self) -> Optional[LogTarget]:
        """type_id를 분류에 맞는 대상 타입으로 변환합니다. 대상이 없으면 None."""
        if not self.type_id:
            return None
        target_cls = _TARGET_BY_TYPE.get(self.activity_type)
        if target_cls is None:
            return None
        return target_cls(self.type_id)

    @classmethod
    def create(cls, log_id: str, activity_type: ActivityLogType, type_id: Optional[str],
               request_type: Optional[RequestType] = None, performed_by: Optional[str] = None,
               description: Optional[str] = None, timestamp: Optional[datetime] = None) -> "ActivityLog":
        """
        새 로그를 생성합니다. request_type은 REQUEST_MANAGEMENT 로그에만, 그리고 반드시 지정되어야 합니다.
        """
        is_request = activity_type is ActivityLogType.REQUEST_MANAGEMENT
        if is_request and request_type is None:
            raise ValueError("REQUEST_MANAGEMENT 로그에는 request_type이 필요합니다.")
        if not is_request and request_type is not None:
            raise ValueError(f"{activity_type.value} 로그에는 request_type을 지정할 수 없습니다.")
        return cls(
            log_id=log_id,
            activity_type=activity_type,
            timestamp=timestamp or DateTimeUtils.now(),
            type_id=type_id,
            request_type=request_type,
            performed_by=performed_by,
            description=description
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ActivityLog":
        """
        Firestore 문서 딕셔너리로부터 ActivityLog를 생성합니다.
        REQUEST_MANAGEMENT 로그의 request_type 누락은 그대로 두고(변환 단계에서 검증),
        다른 분류에 저장된 request_type은 경고 후 무시합니다.
        """
        activity_type = ActivityLogType(data['activity_type'])

        request_type = None
        raw_request_type = data.get('request_type')
        if raw_request_type:
            if activity_type is ActivityLogType.REQUEST_MANAGEMENT:
                request_type = RequestType(raw_request_type)
            else:
                logging.warning(f"Ignoring request_type '{raw_request_type}' on {activity_type.value} log {data.get('log_id')}")

        return cls(
            log_id=data['log_id'],
            activity_type=activity_type,
            timestamp=DateTimeUtils.to_utc_datetime(data.get('timestamp'), 'timestamp'),
            type_id=data.get('type_id'),
            request_type=request_type,
            performed_by=data.get('performed_by'),
            description=data.get('description')
        )

    def to_dict(self) -> Dict[str, Any]:
        """Firestore 저장용 딕셔너리. Enum은 문자열 값으로 저장합니다."""
        return DateTimeUtils.for_firestore({
            'log_id': self.log_id,
            'activity_type': self.activity_type.value,
            'request_type': self.request_type.value if self.request_type else None,
            'type_id': self.type_id,
            'performed_by': self.performed_by,
            'description': self.description,
            'timestamp': self.timestamp
        })
