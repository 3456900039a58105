# petstay/api/history/conftest.py
"""
활동 로그 파이프라인 테스트용 인메모리 협력 서비스와 기본 데이터셋.
"""
from datetime import datetime, timezone, timedelta

import pytest

from petstay.api.history.context import ContextBuilder
from petstay.api.history.services import HistoryLogSearchService
from petstay.core.exceptions import PersistenceError
from petstay.core.responses import DomainResponse, ErrorType
from petstay.models.activity_log import ActivityLog, ActivityLogType, RequestType
from petstay.models.boarding import Boarding, BoardingPricing, BoardingType
from petstay.models.owner import OwnerBoardingDetails
from petstay.models.pet import Pet, PetBoardingDetails, AnimalType
from petstay.models.request import Request, Extension, Grooming

BASE_TIME = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)


class FakeBoardingService:
    def __init__(self):
        self.boardings = {}
        self.fail_with = None

    def find_boarding_by_id(self, boarding_id):
        if self.fail_with:
            return DomainResponse.error(self.fail_with, ErrorType.SERVER_ERROR)
        boarding = self.boardings.get(boarding_id)
        if boarding is None:
            return DomainResponse.error(f"Boarding not found with ID: {boarding_id}", ErrorType.NOT_FOUND)
        return DomainResponse.ok(boarding)


class FakePricingService:
    def __init__(self):
        self.pricing = {}
        self.calls = []

    def get_boarding_pricing(self, boarding_id):
        self.calls.append(boarding_id)
        return self.pricing.get(boarding_id)


class FakePetService:
    def __init__(self):
        self.pets = {}
        self.raise_on = set()
        self.details_calls = []

    def get_pet_by_id(self, pet_id):
        return self.pets.get(pet_id)

    def get_pet_boarding_details(self, pet_id):
        self.details_calls.append(pet_id)
        if pet_id in self.raise_on:
            raise PersistenceError(f"Failed to read pets/{pet_id}")
        pet = self.pets.get(pet_id)
        return PetBoardingDetails.from_pet(pet) if pet else None


class FakeOwnerService:
    def __init__(self):
        self.owners = {}

    def get_owner_boarding_details(self, owner_id):
        return self.owners.get(owner_id)


class FakeRequestService:
    def __init__(self):
        self.requests = {}
        self.extensions = {}
        self.groomings = {}
        self.extension_calls = []
        self.grooming_calls = []

    def search_by_request_id(self, request_id):
        return self.requests.get(request_id)

    def search_extension_by_request_id(self, request_id):
        self.extension_calls.append(request_id)
        return self.extensions.get(request_id)

    def search_grooming_by_request_id(self, request_id):
        self.grooming_calls.append(request_id)
        return self.groomings.get(request_id)


class FakeHistoryRepository:
    def __init__(self):
        self.logs = []

    def search_recently(self):
        return max(self.logs, key=lambda log: log.timestamp) if self.logs else None

    def search_all(self):
        return sorted(self.logs, key=lambda log: log.timestamp, reverse=True)

    def search_by_id(self, log_id):
        return next((log for log in self.logs if log.log_id == log_id), None)

    def search_by_activity_type(self, activity_type):
        return [log for log in self.search_all() if log.activity_type is activity_type]


def make_log(log_id, activity_type, type_id, request_type=None, minutes=0):
    return ActivityLog(
        log_id=log_id,
        activity_type=activity_type,
        timestamp=BASE_TIME + timedelta(minutes=minutes),
        type_id=type_id,
        request_type=request_type,
        performed_by="staff-1"
    )


class World:
    """협력 서비스 묶음과 기본 데이터."""
    def __init__(self):
        self.boardings = FakeBoardingService()
        self.pricing = FakePricingService()
        self.pets = FakePetService()
        self.owners = FakeOwnerService()
        self.requests = FakeRequestService()
        self.repository = FakeHistoryRepository()

        self.owners.owners["O1"] = OwnerBoardingDetails(
            owner_id="O1", full_name="Juan Dela Cruz", email="juan@example.com", phone_number="09171234567"
        )
        self.pets.pets["P1"] = Pet(pet_id="P1", owner_id="O1", name="Max", animal_type=AnimalType.DOG, breed="Shih Tzu", age=3)
        self.boardings.boardings["B1"] = Boarding(
            boarding_id="B1", pet_id="P1", owner_id="O1", boarding_type=BoardingType.DAYCARE,
            boarding_start=BASE_TIME, boarding_end=BASE_TIME + timedelta(hours=8),
            boarding_status="ACTIVE", payment_status="PAID"
        )
        self.pricing.pricing["B1"] = BoardingPricing(boarding_id="B1", rate_per_hour=100.0, duration_hours=8, total_price=800.0)

        self.add_request("R1", RequestType.BOARDING_EXTENSION)
        self.requests.extensions["R1"] = Extension(
            extension_id="E1", request_id="R1", boarding_id="B1", additional_price=300.0, extended_hours=3
        )
        self.add_request("R2", RequestType.GROOMING_SERVICE)
        self.requests.groomings["R2"] = Grooming(
            grooming_id="G1", request_id="R2", boarding_id="B1", service_type="Full Groom", grooming_price=550.0
        )
        self.add_request("R3", RequestType.PHOTO_REQUEST)
        self.add_request("R4", RequestType.VIDEO_REQUEST)
        self.add_request("R5", RequestType.GENERAL_INQUIRY)

    def add_request(self, request_id, request_type, pet_id="P1", boarding_id="B1"):
        self.requests.requests[request_id] = Request(
            request_id=request_id, owner_id="O1", pet_id=pet_id, boarding_id=boarding_id,
            request_type=request_type, request_status="PENDING", description="please"
        )

    def builder(self):
        return ContextBuilder(
            boarding_service=self.boardings,
            pricing_service=self.pricing,
            pet_service=self.pets,
            owner_service=self.owners,
            request_service=self.requests
        )

    def service(self):
        return HistoryLogSearchService(repository=self.repository, context_builder=self.builder())


@pytest.fixture
def world():
    return World()


@pytest.fixture
def builder(world):
    return world.builder()


@pytest.fixture
def history_service(world):
    return world.service()
