# petstay/api/history/transform.py
"""
(로그, DataContext) 쌍을 사람이 읽을 수 있는 피드 항목(DTO)으로 변환합니다.
I/O가 없는 순수 함수들로만 구성됩니다.
"""
import logging
from typing import Callable, Dict, Optional, Type

from petstay.api.history.context import (
    BoardingContext, DataContext, OwnerContext, PetContext,
    RequestExtensionContext, RequestGroomingContext, RequestMediaContext
)
from petstay.api.history.dto import (
    ActivityLogDTO, BoardingLogDTO, OwnerLogDTO, PetLogDTO,
    RequestExtensionLogDTO, RequestGroomingLogDTO, RequestMediaLogDTO
)
from petstay.core.exceptions import DataIntegrityError
from petstay.models.activity_log import ActivityLog, ActivityLogType, RequestType

logger = logging.getLogger(__name__)


def _header(log: ActivityLog, message: str) -> Dict:
    return dict(
        log_id=log.log_id,
        activity_type=log.activity_type.display_name,
        request_type=log.request_type.value if log.request_type else None,
        performed_by=log.performed_by,
        timestamp=log.timestamp,
        message=message
    )


def _money(amount: float) -> str:
    return f"{amount:,.2f}"


def transform_boarding(log: ActivityLog, context: BoardingContext) -> BoardingLogDTO:
    boarding, pet = context.boarding, context.pet
    message = (f"{boarding.boarding_type.value.replace('_', ' ').title()} boarding for {pet.pet_name}"
               f" ({boarding.boarding_status or 'PENDING'}), total {_money(context.pricing.total_price)}")
    return BoardingLogDTO(
        **_header(log, message),
        boarding_id=boarding.boarding_id,
        boarding_type=boarding.boarding_type.value,
        boarding_status=boarding.boarding_status,
        payment_status=boarding.payment_status,
        boarding_start=boarding.boarding_start,
        boarding_end=boarding.boarding_end,
        pet_id=pet.pet_id,
        pet_name=pet.pet_name,
        owner_id=boarding.owner_id,
        total_price=context.pricing.total_price
    )


def transform_register_owner(log: ActivityLog, context: OwnerContext) -> OwnerLogDTO:
    owner = context.owner
    return OwnerLogDTO(
        **_header(log, f"New client registered: {owner.full_name}"),
        owner_id=owner.owner_id,
        owner_name=owner.full_name,
        email=owner.email,
        phone_number=owner.phone_number
    )


def transform_register_pet(log: ActivityLog, context: PetContext) -> PetLogDTO:
    pet, owner = context.pet, context.owner
    return PetLogDTO(
        **_header(log, f"New pet registered: {pet.pet_name} ({pet.animal_type.lower()}) owned by {owner.full_name}"),
        pet_id=pet.pet_id,
        pet_name=pet.pet_name,
        animal_type=pet.animal_type,
        breed=pet.breed,
        owner_id=owner.owner_id,
        owner_name=owner.full_name
    )


def transform_request_extension(log: ActivityLog, context: RequestExtensionContext) -> RequestExtensionLogDTO:
    extension, pet = context.extension, context.pet
    message = (f"Boarding extension requested for {pet.pet_name}: +{extension.extended_hours} hours"
               f" ({_money(extension.additional_price)})")
    return RequestExtensionLogDTO(
        **_header(log, message),
        request_id=context.request.request_id,
        request_status=context.request.request_status,
        boarding_id=context.boarding.boarding_id,
        boarding_end=context.boarding.boarding_end,
        pet_id=pet.pet_id,
        pet_name=pet.pet_name,
        extended_hours=extension.extended_hours,
        additional_price=extension.additional_price,
        total_price=context.pricing.total_price,
        approved=extension.approved
    )


def transform_request_grooming(log: ActivityLog, context: RequestGroomingContext) -> RequestGroomingLogDTO:
    grooming, pet = context.grooming, context.pet
    return RequestGroomingLogDTO(
        **_header(log, f"Grooming ({grooming.service_type}) requested for {pet.pet_name}"),
        request_id=context.request.request_id,
        request_status=context.request.request_status,
        pet_id=pet.pet_id,
        pet_name=pet.pet_name,
        service_type=grooming.service_type,
        grooming_price=grooming.grooming_price,
        approved=grooming.approved
    )


def transform_request_media(log: ActivityLog, context: RequestMediaContext) -> RequestMediaLogDTO:
    kind = "Video" if log.request_type is RequestType.VIDEO_REQUEST else "Photo"
    return RequestMediaLogDTO(
        **_header(log, f"{kind} update requested for {context.pet.pet_name}"),
        request_id=context.request.request_id,
        request_status=context.request.request_status,
        pet_id=context.pet.pet_id,
        pet_name=context.pet.pet_name,
        description=context.request.description
    )


_ACTIVITY_TRANSFORMS: Dict[ActivityLogType, tuple] = {
    ActivityLogType.BOARDING_MANAGEMENT: (BoardingContext, transform_boarding),
    ActivityLogType.PET_OWNER_MANAGEMENT: (OwnerContext, transform_register_owner),
    ActivityLogType.PET_MANAGEMENT: (PetContext, transform_register_pet),
}

_REQUEST_TRANSFORMS: Dict[RequestType, tuple] = {
    RequestType.PHOTO_REQUEST: (RequestMediaContext, transform_request_media),
    RequestType.VIDEO_REQUEST: (RequestMediaContext, transform_request_media),
    RequestType.BOARDING_EXTENSION: (RequestExtensionContext, transform_request_extension),
    RequestType.GROOMING_SERVICE: (RequestGroomingContext, transform_request_grooming),
}


def transform(log: ActivityLog, context: Optional[DataContext]) -> Optional[ActivityLogDTO]:
    """
    로그 분류(요청 로그는 request_type까지)에 맞는 변환 함수를 골라 DTO를 만듭니다.

    - REQUEST_MANAGEMENT 로그에 request_type이 없으면 DataIntegrityError (컨텍스트 유무와 무관)
    - 컨텍스트가 없거나 분류와 맞지 않는 컨텍스트면 None
    """
    if log.activity_type is ActivityLogType.REQUEST_MANAGEMENT:
        if log.request_type is None:
            raise DataIntegrityError(f"Request type is null for request management log {log.log_id}")
        entry = _REQUEST_TRANSFORMS.get(log.request_type)
    else:
        entry = _ACTIVITY_TRANSFORMS.get(log.activity_type)

    if entry is None or context is None:
        return None

    expected: Type = entry[0]
    mapper: Callable = entry[1]
    if not isinstance(context, expected):
        logger.warning(f"Context mismatch for log {log.log_id}: expected {expected.__name__}, got {type(context).__name__}")
        return None
    return mapper(log, context)
