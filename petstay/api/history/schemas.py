# petstay/api/history/schemas.py
from marshmallow import Schema, fields, validate

from petstay.api.history.dto import (
    ActivityLogDTO, BoardingLogDTO, OwnerLogDTO, PetLogDTO,
    RequestExtensionLogDTO, RequestGroomingLogDTO, RequestMediaLogDTO
)
from petstay.models.activity_log import ActivityLogType

class ActivityTypeParamSchema(Schema):
    """GET /api/history/type/<activity_type> 경로 파라미터 검증 스키마."""
    activity_type = fields.Str(required=True, validate=validate.OneOf([e.value for e in ActivityLogType]))

class ActivityLogBaseSchema(Schema):
    """모든 피드 항목에 공통으로 포함되는 헤더 필드."""
    log_id = fields.Str()
    activity_type = fields.Str()
    request_type = fields.Str(allow_none=True)
    performed_by = fields.Str(allow_none=True)
    timestamp = fields.DateTime()
    message = fields.Str()

class BoardingLogSchema(ActivityLogBaseSchema):
    boarding_id = fields.Str()
    boarding_type = fields.Str()
    boarding_status = fields.Str(allow_none=True)
    payment_status = fields.Str(allow_none=True)
    boarding_start = fields.DateTime(allow_none=True)
    boarding_end = fields.DateTime(allow_none=True)
    pet_id = fields.Str()
    pet_name = fields.Str()
    owner_id = fields.Str()
    total_price = fields.Float()

class OwnerLogSchema(ActivityLogBaseSchema):
    owner_id = fields.Str()
    owner_name = fields.Str()
    email = fields.Str(allow_none=True)
    phone_number = fields.Str(allow_none=True)

class PetLogSchema(ActivityLogBaseSchema):
    pet_id = fields.Str()
    pet_name = fields.Str()
    animal_type = fields.Str()
    breed = fields.Str(allow_none=True)
    owner_id = fields.Str()
    owner_name = fields.Str()

class RequestExtensionLogSchema(ActivityLogBaseSchema):
    request_id = fields.Str()
    request_status = fields.Str(allow_none=True)
    boarding_id = fields.Str()
    boarding_end = fields.DateTime(allow_none=True)
    pet_id = fields.Str()
    pet_name = fields.Str()
    extended_hours = fields.Int()
    additional_price = fields.Float()
    total_price = fields.Float()
    approved = fields.Bool()

class RequestGroomingLogSchema(ActivityLogBaseSchema):
    request_id = fields.Str()
    request_status = fields.Str(allow_none=True)
    pet_id = fields.Str()
    pet_name = fields.Str()
    service_type = fields.Str()
    grooming_price = fields.Float()
    approved = fields.Bool()

class RequestMediaLogSchema(ActivityLogBaseSchema):
    request_id = fields.Str()
    request_status = fields.Str(allow_none=True)
    pet_id = fields.Str()
    pet_name = fields.Str()
    description = fields.Str(allow_none=True)

_SCHEMA_BY_DTO = {
    BoardingLogDTO: BoardingLogSchema,
    OwnerLogDTO: OwnerLogSchema,
    PetLogDTO: PetLogSchema,
    RequestExtensionLogDTO: RequestExtensionLogSchema,
    RequestGroomingLogDTO: RequestGroomingLogSchema,
    RequestMediaLogDTO: RequestMediaLogSchema,
}

def dump_activity_log(dto: ActivityLogDTO) -> dict:
    """DTO 타입에 맞는 스키마로 직렬화합니다."""
    schema_cls = _SCHEMA_BY_DTO.get(type(dto), ActivityLogBaseSchema)
    return schema_cls().dump(dto)
