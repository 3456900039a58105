# petstay/api/history/routes.py
import logging
from flask import Blueprint, jsonify, current_app
from marshmallow import ValidationError

from petstay.core.exceptions import ActivityLogNotFoundError, NoActivityLogsError, PersistenceError
from petstay.models.activity_log import ActivityLogType
from .schemas import ActivityTypeParamSchema, dump_activity_log

history_bp = Blueprint('history_bp', __name__)

@history_bp.route('/recent', methods=['GET'])
def get_recent_log():
    """가장 최근 활동 로그 한 건을 조회합니다."""
    history_service = current_app.services['history']
    try:
        dto = history_service.get_recent_log()
        return jsonify({"log": dump_activity_log(dto) if dto else None}), 200
    except NoActivityLogsError as e:
        return jsonify({"error_code": "NO_ACTIVITY_LOGS", "message": str(e)}), 404
    except PersistenceError as e:
        logging.error(f"Get recent activity log API error: {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": str(e)}), 500

@history_bp.route('/', methods=['GET'])
def get_all_logs():
    """전체 활동 피드를 조회합니다. 컨텍스트를 만들 수 없는 로그는 응답에서 제외됩니다."""
    history_service = current_app.services['history']
    try:
        dtos = history_service.get_all()
        return jsonify({"logs": [dump_activity_log(dto) for dto in dtos]}), 200
    except NoActivityLogsError as e:
        return jsonify({"error_code": "NO_ACTIVITY_LOGS", "message": str(e)}), 404
    except PersistenceError as e:
        logging.error(f"Get activity logs API error: {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": str(e)}), 500

@history_bp.route('/<string:log_id>', methods=['GET'])
def get_log(log_id: str):
    """ID로 활동 로그를 조회합니다."""
    history_service = current_app.services['history']
    try:
        dto = history_service.search_by_id(log_id)
        return jsonify({"log": dump_activity_log(dto) if dto else None}), 200
    except ActivityLogNotFoundError as e:
        return jsonify({"error_code": "LOG_NOT_FOUND", "message": str(e)}), 404
    except PersistenceError as e:
        logging.error(f"Get activity log API error (log_id: {log_id}): {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": str(e)}), 500

@history_bp.route('/type/<string:activity_type>', methods=['GET'])
def get_logs_by_type(activity_type: str):
    """분류별 활동 로그를 조회합니다. 해당 분류 로그가 없으면 빈 목록을 반환합니다."""
    history_service = current_app.services['history']
    try:
        params = ActivityTypeParamSchema().load({"activity_type": activity_type.upper()})
        dtos = history_service.search_by_activity_type(ActivityLogType(params['activity_type']))
        return jsonify({"logs": [dump_activity_log(dto) for dto in dtos]}), 200
    except ValidationError as err:
        return jsonify({"error_code": "VALIDATION_ERROR", "details": err.messages}), 400
    except PersistenceError as e:
        logging.error(f"Get activity logs by type API error ({activity_type}): {e}", exc_info=True)
        return jsonify({"error_code": "FETCH_FAILED", "message": str(e)}), 500
