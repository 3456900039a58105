# petstay/api/history/dto.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

@dataclass(frozen=True)
class ActivityLogDTO:
    """활동 피드 항목의 공통 헤더. 실제 응답은 분류별 하위 클래스입니다."""
    log_id: str
    activity_type: str
    request_type: Optional[str]
    performed_by: Optional[str]
    timestamp: datetime
    message: str

@dataclass(frozen=True)
class BoardingLogDTO(ActivityLogDTO):
    boarding_id: str
    boarding_type: str
    boarding_status: Optional[str]
    payment_status: Optional[str]
    boarding_start: Optional[datetime]
    boarding_end: Optional[datetime]
    pet_id: str
    pet_name: str
    owner_id: str
    total_price: float

@dataclass(frozen=True)
class OwnerLogDTO(ActivityLogDTO):
    owner_id: str
    owner_name: str
    email: Optional[str]
    phone_number: Optional[str]

@dataclass(frozen=True)
class PetLogDTO(ActivityLogDTO):
    pet_id: str
    pet_name: str
    animal_type: str
    breed: Optional[str]
    owner_id: str
    owner_name: str

@dataclass(frozen=True)
class RequestExtensionLogDTO(ActivityLogDTO):
    request_id: str
    request_status: Optional[str]
    boarding_id: str
    boarding_end: Optional[datetime]
    pet_id: str
    pet_name: str
    extended_hours: int
    additional_price: float
    total_price: float
    approved: bool

@dataclass(frozen=True)
class RequestGroomingLogDTO(ActivityLogDTO):
    request_id: str
    request_status: Optional[str]
    pet_id: str
    pet_name: str
    service_type: str
    grooming_price: float
    approved: bool

@dataclass(frozen=True)
class RequestMediaLogDTO(ActivityLogDTO):
    request_id: str
    request_status: Optional[str]
    pet_id: str
    pet_name: str
    description: Optional[str]
