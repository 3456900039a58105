# petstay/models/boarding.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any

from petstay.utils.datetime_utils import DateTimeUtils

class BoardingType(Enum):
    DAYCARE = "DAYCARE"
    LONG_STAY = "LONG_STAY"

    @classmethod
    def from_string_or_default(cls, value: Optional[str]) -> "BoardingType":
        """대소문자 구분 없이 변환하며, 알 수 없는 값은 DAYCARE로 처리합니다."""
        for boarding_type in cls:
            if value and boarding_type.value == value.upper():
                return boarding_type
        return cls.DAYCARE

@dataclass
class Boarding:
    """Firestore 'boardings' 컬렉션 문서 구조. 반려동물 한 마리의 위탁 기간 한 건."""
    boarding_id: str
    pet_id: str
    owner_id: str
    boarding_type: BoardingType
    boarding_start: Optional[datetime] = None
    boarding_end: Optional[datetime] = None
    boarding_status: Optional[str] = None
    payment_status: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Boarding":
        return cls(
            boarding_id=data['boarding_id'],
            pet_id=data['pet_id'],
            owner_id=data['owner_id'],
            boarding_type=BoardingType.from_string_or_default(data.get('boarding_type')),
            boarding_start=DateTimeUtils.to_utc_datetime(data.get('boarding_start'), 'boarding_start'),
            boarding_end=DateTimeUtils.to_utc_datetime(data.get('boarding_end'), 'boarding_end'),
            boarding_status=data.get('boarding_status'),
            payment_status=data.get('payment_status'),
            notes=data.get('notes')
        )

@dataclass
class BoardingPricing:
    """Firestore 'boarding_pricing' 컬렉션 문서 구조. 위탁 한 건의 요금 내역."""
    boarding_id: str
    rate_per_hour: float
    duration_hours: int
    grooming_total: float = 0.0
    extension_total: float = 0.0
    total_price: float = 0.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoardingPricing":
        rate = float(data['rate_per_hour'])
        hours = int(data['duration_hours'])
        grooming_total = float(data.get('grooming_total') or 0)
        extension_total = float(data.get('extension_total') or 0)
        total = data.get('total_price')
        return cls(
            boarding_id=data['boarding_id'],
            rate_per_hour=rate,
            duration_hours=hours,
            grooming_total=grooming_total,
            extension_total=extension_total,
            # 총액이 저장되지 않은 문서는 항목 합계로 계산
            total_price=float(total) if total is not None else rate * hours + grooming_total + extension_total
        )
