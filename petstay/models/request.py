# petstay/models/request.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Dict, Any

from petstay.models.activity_log import RequestType
from petstay.utils.datetime_utils import DateTimeUtils

@dataclass
class Request:
    """
    Firestore 'requests' 컬렉션 문서 구조.
    위탁 중인 반려동물에 대한 고객 요청(연장, 미용, 사진/영상 요청 등) 한 건.
    """
    request_id: str
    owner_id: str
    pet_id: str
    boarding_id: str
    request_type: RequestType
    request_status: Optional[str] = None
    description: Optional[str] = None
    request_time: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Request":
        return cls(
            request_id=data['request_id'],
            owner_id=data['owner_id'],
            pet_id=data['pet_id'],
            boarding_id=data['boarding_id'],
            request_type=RequestType(data['request_type']),
            request_status=data.get('request_status'),
            description=data.get('description'),
            request_time=DateTimeUtils.to_utc_datetime(data.get('request_time'), 'request_time')
        )

@dataclass
class Extension:
    """Firestore 'boarding_extension' 컬렉션 문서 구조. 위탁 연장 요청의 세부 내역."""
    extension_id: str
    request_id: str
    boarding_id: str
    additional_price: float
    extended_hours: int
    description: Optional[str] = None
    approved: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Extension":
        return cls(
            extension_id=data['extension_id'],
            request_id=data['request_id'],
            boarding_id=data['boarding_id'],
            additional_price=float(data.get('additional_price') or 0),
            extended_hours=int(data.get('extended_hours') or 0),
            description=data.get('description'),
            approved=bool(data.get('approved', False))
        )

@dataclass
class Grooming:
    """Firestore 'grooming_request' 컬렉션 문서 구조. 미용 서비스 요청의 세부 내역."""
    grooming_id: str
    request_id: str
    boarding_id: str
    service_type: str
    grooming_price: float
    description: Optional[str] = None
    approved: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Grooming":
        return cls(
            grooming_id=data['grooming_id'],
            request_id=data['request_id'],
            boarding_id=data['boarding_id'],
            service_type=data['service_type'],
            grooming_price=float(data.get('grooming_price') or 0),
            description=data.get('description'),
            approved=bool(data.get('approved', False))
        )
