# petstay/api/history/context.py
"""
활동 로그 한 건을 피드 항목으로 변환하기 전에 필요한 하위 엔티티를 모으는 단계.

로그 분류마다 필요한 엔티티가 다르므로 분류별 컨텍스트 타입을 따로 두고,
하나라도 조회되지 않으면 컨텍스트 전체를 None으로 처리합니다(all-or-nothing).
조회 실패는 이 단계에서 흡수되어 로그로만 남고, 호출자에게 예외로 전달되지 않습니다.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Union

from petstay.api.boarding.services import BoardingService, PricingService
from petstay.api.owners.services import OwnerService
from petstay.api.pets.services import PetService
from petstay.api.requests.services import RequestSearchService
from petstay.core.exceptions import PersistenceError
from petstay.core.responses import DomainResponse, ErrorType
from petstay.models.activity_log import (
    ActivityLog, BoardingTarget, OwnerTarget, PetTarget, RequestTarget, RequestType
)
from petstay.models.boarding import Boarding, BoardingPricing
from petstay.models.owner import OwnerBoardingDetails
from petstay.models.pet import PetBoardingDetails
from petstay.models.request import Extension, Grooming, Request

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoardingContext:
    boarding: Boarding
    pricing: BoardingPricing
    pet: PetBoardingDetails

@dataclass(frozen=True)
class OwnerContext:
    owner: OwnerBoardingDetails

@dataclass(frozen=True)
class PetContext:
    owner: OwnerBoardingDetails
    pet: PetBoardingDetails

@dataclass(frozen=True)
class RequestExtensionContext:
    request: Request
    boarding: Boarding
    pricing: BoardingPricing
    extension: Extension
    pet: PetBoardingDetails

@dataclass(frozen=True)
class RequestGroomingContext:
    request: Request
    grooming: Grooming
    pet: PetBoardingDetails

@dataclass(frozen=True)
class RequestMediaContext:
    request: Request
    pet: PetBoardingDetails

DataContext = Union[
    BoardingContext, OwnerContext, PetContext,
    RequestExtensionContext, RequestGroomingContext, RequestMediaContext
]


class FailureReason(Enum):
    MISSING_KEY = "MISSING_KEY"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"

@dataclass(frozen=True)
class LookupFailure:
    """하위 엔티티 조회 한 건의 실패 내용."""
    lookup: str
    key: Optional[str]
    reason: FailureReason
    detail: Optional[str] = None

    def __str__(self) -> str:
        text = f"{self.lookup}({self.key}): {self.reason.value}"
        return f"{text} - {self.detail}" if self.detail else text


class _Lookups:
    """
    로그 한 건을 처리하는 동안의 조회 경계.
    협력 서비스마다 다른 반환 규칙(DomainResponse, Optional)을 '값 또는 None'으로 맞추고
    실패 내용을 failures에 모읍니다.
    """
    def __init__(self):
        self.failures: List[LookupFailure] = []

    def fetch(self, lookup: str, func: Callable[[str], Any], key: Optional[str]) -> Optional[Any]:
        if not key:
            self.failures.append(LookupFailure(lookup, key, FailureReason.MISSING_KEY))
            return None
        try:
            result = func(key)
        except (PersistenceError, ValueError, KeyError) as e:
            self.failures.append(LookupFailure(lookup, key, FailureReason.ERROR, str(e)))
            return None

        if isinstance(result, DomainResponse):
            if not result.is_success():
                reason = FailureReason.NOT_FOUND if result.error_type in (None, ErrorType.NOT_FOUND) \
                    else FailureReason.ERROR
                self.failures.append(LookupFailure(lookup, key, reason, result.message))
                return None
            result = result.data

        if result is None:
            self.failures.append(LookupFailure(lookup, key, FailureReason.NOT_FOUND))
        return result


class ContextBuilder:
    """로그 분류에 따라 필요한 협력 서비스를 호출해 DataContext를 만듭니다."""
    def __init__(self,
                 boarding_service: BoardingService,
                 pricing_service: PricingService,
                 pet_service: PetService,
                 owner_service: OwnerService,
                 request_service: RequestSearchService):
        self.boarding_service = boarding_service
        self.pricing_service = pricing_service
        self.pet_service = pet_service
        self.owner_service = owner_service
        self.request_service = request_service

    def build(self, log: ActivityLog) -> Optional[DataContext]:
        """
        로그 한 건의 DataContext를 반환합니다. 필요한 엔티티 중 하나라도 없으면 None.
        """
        lookups = _Lookups()
        target = log.target()
        logger.info(f"Building context for {log.activity_type.display_name} log {log.log_id}")

        if isinstance(target, BoardingTarget):
            context = self._build_boarding(lookups, target)
        elif isinstance(target, OwnerTarget):
            context = self._build_owner(lookups, target)
        elif isinstance(target, PetTarget):
            context = self._build_pet(lookups, target)
        elif isinstance(target, RequestTarget):
            context = self._build_request(lookups, target)
        else:
            context = None
            logger.info(f"No context target for log {log.log_id} ({log.activity_type.value}, type_id={log.type_id})")

        if context is None:
            self._report(log, lookups.failures)
        return context

    def _report(self, log: ActivityLog, failures: List[LookupFailure]) -> None:
        if not failures:
            return
        summary = "; ".join(str(f) for f in failures)
        if any(f.reason is FailureReason.ERROR for f in failures):
            logger.warning(f"Failed to build activity log context for {log.log_id}: {summary}")
        else:
            logger.info(f"Activity log {log.log_id} skipped, missing data: {summary}")

    def _build_boarding(self, lookups: _Lookups, target: BoardingTarget) -> Optional[BoardingContext]:
        boarding = lookups.fetch('boarding', self.boarding_service.find_boarding_by_id, target.boarding_id)
        if boarding is None:
            return None
        pricing = lookups.fetch('pricing', self.pricing_service.get_boarding_pricing, boarding.boarding_id)
        pet = lookups.fetch('pet_details', self.pet_service.get_pet_boarding_details, boarding.pet_id)
        if pricing is None or pet is None:
            return None
        return BoardingContext(boarding=boarding, pricing=pricing, pet=pet)

    def _build_owner(self, lookups: _Lookups, target: OwnerTarget) -> Optional[OwnerContext]:
        owner = lookups.fetch('owner_details', self.owner_service.get_owner_boarding_details, target.owner_id)
        if owner is None:
            return None
        return OwnerContext(owner=owner)

    def _build_pet(self, lookups: _Lookups, target: PetTarget) -> Optional[PetContext]:
        pet = lookups.fetch('pet', self.pet_service.get_pet_by_id, target.pet_id)
        if pet is None:
            return None
        owner = lookups.fetch('owner_details', self.owner_service.get_owner_boarding_details, pet.owner_id)
        details = lookups.fetch('pet_details', self.pet_service.get_pet_boarding_details, pet.pet_id)
        if owner is None or details is None:
            return None
        return PetContext(owner=owner, pet=details)

    def _build_request(self, lookups: _Lookups, target: RequestTarget) -> Optional[DataContext]:
        request = lookups.fetch('request', self.request_service.search_by_request_id, target.request_id)
        if request is None:
            return None
        pet = lookups.fetch('pet_details', self.pet_service.get_pet_boarding_details, request.pet_id)
        if pet is None:
            return None

        # 로그가 아닌 요청 문서 자신의 request_type으로 분기
        if request.request_type is RequestType.BOARDING_EXTENSION:
            boarding = lookups.fetch('boarding', self.boarding_service.find_boarding_by_id, request.boarding_id)
            pricing = lookups.fetch('pricing', self.pricing_service.get_boarding_pricing, request.boarding_id)
            extension = lookups.fetch('extension', self.request_service.search_extension_by_request_id, request.request_id)
            if boarding is None or pricing is None or extension is None:
                return None
            return RequestExtensionContext(request=request, boarding=boarding, pricing=pricing,
                                           extension=extension, pet=pet)

        if request.request_type is RequestType.GROOMING_SERVICE:
            grooming = lookups.fetch('grooming', self.request_service.search_grooming_by_request_id, request.request_id)
            if grooming is None:
                return None
            return RequestGroomingContext(request=request, grooming=grooming, pet=pet)

        if request.request_type in (RequestType.PHOTO_REQUEST, RequestType.VIDEO_REQUEST):
            return RequestMediaContext(request=request, pet=pet)

        logger.info(f"Request {request.request_id} has no feed context for type {request.request_type.value}")
        return None
