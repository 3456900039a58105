# petstay/api/history/test_context.py
"""
DataContext 생성 단계 테스트

사용법: python -m pytest petstay/api/history/test_context.py -v
"""
import logging

import pytest

from petstay.api.history.conftest import make_log
from petstay.api.history.context import (
    BoardingContext, OwnerContext, PetContext,
    RequestExtensionContext, RequestGroomingContext, RequestMediaContext
)
from petstay.models.activity_log import ActivityLogType, RequestType

BOARDING = ActivityLogType.BOARDING_MANAGEMENT
REQUEST = ActivityLogType.REQUEST_MANAGEMENT


# ----- BOARDING_MANAGEMENT -----

def test_boarding_context_when_all_lookups_succeed(builder):
    context = builder.build(make_log("L1", BOARDING, "B1"))

    assert isinstance(context, BoardingContext)
    assert context.boarding.boarding_id == "B1"
    assert context.pricing.total_price == 800.0
    assert context.pet.pet_name == "Max"

@pytest.mark.parametrize("break_it", ["boarding", "pricing", "pet"])
def test_boarding_context_is_all_or_nothing(world, builder, break_it):
    """위탁/요금/반려동물 중 하나라도 없으면 컨텍스트 전체가 None."""
    if break_it == "boarding":
        del world.boardings.boardings["B1"]
    elif break_it == "pricing":
        del world.pricing.pricing["B1"]
    else:
        del world.pets.pets["P1"]

    assert builder.build(make_log("L1", BOARDING, "B1")) is None

def test_boarding_failure_response_stops_before_other_lookups(world, builder):
    world.boardings.fail_with = "Firestore unavailable"

    assert builder.build(make_log("L1", BOARDING, "B1")) is None
    assert world.pricing.calls == []
    assert world.pets.details_calls == []

def test_missing_type_id_gives_no_context(world, builder):
    assert builder.build(make_log("L1", BOARDING, None)) is None
    assert world.pricing.calls == []


# ----- PET_OWNER_MANAGEMENT / PET_MANAGEMENT -----

def test_owner_context(builder):
    context = builder.build(make_log("L2", ActivityLogType.PET_OWNER_MANAGEMENT, "O1"))

    assert context == OwnerContext(owner=context.owner)
    assert context.owner.full_name == "Juan Dela Cruz"

def test_owner_context_absent_when_owner_missing(builder):
    assert builder.build(make_log("L2", ActivityLogType.PET_OWNER_MANAGEMENT, "O404")) is None

def test_pet_context_uses_pet_owner(builder):
    context = builder.build(make_log("L3", ActivityLogType.PET_MANAGEMENT, "P1"))

    assert isinstance(context, PetContext)
    assert context.owner.owner_id == "O1"
    assert context.pet.pet_id == "P1"

def test_pet_context_absent_when_owner_missing(world, builder):
    del world.owners.owners["O1"]

    assert builder.build(make_log("L3", ActivityLogType.PET_MANAGEMENT, "P1")) is None

def test_pet_context_absent_when_pet_missing(world, builder):
    assert builder.build(make_log("L3", ActivityLogType.PET_MANAGEMENT, "P404")) is None
    assert world.pets.details_calls == []


# ----- REQUEST_MANAGEMENT -----

def test_extension_request_context(builder):
    context = builder.build(make_log("L4", REQUEST, "R1", RequestType.BOARDING_EXTENSION))

    assert isinstance(context, RequestExtensionContext)
    assert context.boarding.boarding_id == "B1"
    assert context.pricing.boarding_id == "B1"
    assert context.extension.extension_id == "E1"
    assert context.pet.pet_id == "P1"

def test_extension_request_context_absent_without_extension(world, builder):
    del world.requests.extensions["R1"]

    assert builder.build(make_log("L4", REQUEST, "R1", RequestType.BOARDING_EXTENSION)) is None

def test_grooming_request_context(world, builder):
    context = builder.build(make_log("L5", REQUEST, "R2", RequestType.GROOMING_SERVICE))

    assert isinstance(context, RequestGroomingContext)
    assert context.grooming.service_type == "Full Groom"
    assert world.requests.extension_calls == []

def test_grooming_request_context_absent_without_grooming(world, builder):
    del world.requests.groomings["R2"]

    assert builder.build(make_log("L5", REQUEST, "R2", RequestType.GROOMING_SERVICE)) is None

@pytest.mark.parametrize("request_id", ["R3", "R4"])
def test_media_requests_only_need_pet_details(world, builder, request_id):
    """사진/영상 요청은 위탁·요금 정보가 없어도 반려동물 정보만으로 컨텍스트가 만들어진다."""
    world.boardings.boardings.clear()
    world.pricing.pricing.clear()

    context = builder.build(make_log("L6", REQUEST, request_id, RequestType.PHOTO_REQUEST))

    assert context == RequestMediaContext(request=world.requests.requests[request_id], pet=context.pet)
    assert world.pricing.calls == []
    assert world.requests.extension_calls == []
    assert world.requests.grooming_calls == []

def test_request_branches_on_request_document_type(world, builder):
    """로그의 request_type이 아니라 요청 문서의 request_type으로 분기한다."""
    context = builder.build(make_log("L7", REQUEST, "R3", RequestType.GROOMING_SERVICE))

    assert isinstance(context, RequestMediaContext)
    assert world.requests.grooming_calls == []

def test_request_without_pet_details_is_absent(world, builder):
    world.add_request("R9", RequestType.PHOTO_REQUEST, pet_id="P404")

    assert builder.build(make_log("L8", REQUEST, "R9", RequestType.PHOTO_REQUEST)) is None

def test_other_request_type_is_absent(builder):
    assert builder.build(make_log("L9", REQUEST, "R5", RequestType.GENERAL_INQUIRY)) is None

def test_unknown_request_is_absent(builder):
    assert builder.build(make_log("L9", REQUEST, "R404", RequestType.PHOTO_REQUEST)) is None

def test_other_activity_type_is_absent(builder):
    assert builder.build(make_log("L10", ActivityLogType.MEDIA_MANAGEMENT, "M1")) is None


# ----- 실패 처리 -----

def test_lookup_errors_are_absorbed_and_logged(world, builder, caplog):
    world.pets.raise_on.add("P1")

    with caplog.at_level(logging.INFO, logger="petstay.api.history.context"):
        context = builder.build(make_log("L1", BOARDING, "B1"))

    assert context is None
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "pet_details(P1): ERROR" in warnings[0].getMessage()

def test_missing_data_is_logged_at_info(world, builder, caplog):
    del world.pricing.pricing["B1"]

    with caplog.at_level(logging.INFO, logger="petstay.api.history.context"):
        builder.build(make_log("L1", BOARDING, "B1"))

    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert any("pricing(B1): NOT_FOUND" in r.getMessage() for r in caplog.records)

def test_value_errors_from_collaborators_are_absorbed(world, builder):
    def broken(owner_id):
        raise ValueError("Invalid owner document")
    world.owners.get_owner_boarding_details = broken

    assert builder.build(make_log("L2", ActivityLogType.PET_OWNER_MANAGEMENT, "O1")) is None

def test_unexpected_errors_are_not_swallowed(world, builder):
    def broken(owner_id):
        raise RuntimeError("bug")
    world.owners.get_owner_boarding_details = broken

    with pytest.raises(RuntimeError):
        builder.build(make_log("L2", ActivityLogType.PET_OWNER_MANAGEMENT, "O1"))
