# petstay/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from typing import Optional
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException
import firebase_admin
from firebase_admin import credentials

# - 설정
from petstay.core.config import config_by_name

# - API 블루프린트
from petstay.api.history.routes import history_bp

# - 서비스 모듈
from petstay.api.boarding.services import BoardingService, PricingService
from petstay.api.owners.services import OwnerService
from petstay.api.pets.services import PetService
from petstay.api.requests.services import RequestSearchService
from petstay.api.history.repository import HistoryLogRepository
from petstay.api.history.context import ContextBuilder
from petstay.api.history.services import HistoryLogSearchService

def create_app(config_name: Optional[str] = None):
    """
    Flask 애플리케이션 팩토리 함수.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 외부 서비스 초기화
    # =====================================================================================
    if not firebase_admin._apps:
        cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
        if not cred_path or not os.path.exists(cred_path):
            raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
        cred = credentials.Certificate(cred_path)
        options = {}
        if app.config.get('FIREBASE_PROJECT_ID'):
            options['projectId'] = app.config['FIREBASE_PROJECT_ID']
        firebase_admin.initialize_app(cred, options)

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}

    # 5-1. 활동 로그 컨텍스트를 구성하는 하위 도메인 서비스
    app.services['boardings'] = BoardingService(collection_name=app.config['BOARDING_COLLECTION'])
    app.services['pricing'] = PricingService(collection_name=app.config['PRICING_COLLECTION'])
    app.services['pets'] = PetService(collection_name=app.config['PET_COLLECTION'])
    app.services['owners'] = OwnerService(collection_name=app.config['OWNER_COLLECTION'])
    app.services['requests'] = RequestSearchService(
        request_collection=app.config['REQUEST_COLLECTION'],
        extension_collection=app.config['EXTENSION_COLLECTION'],
        grooming_collection=app.config['GROOMING_COLLECTION']
    )

    # 5-2. 활동 로그 저장소 및 조회 서비스
    app.services['history_logs'] = HistoryLogRepository(collection_name=app.config['ACTIVITY_LOG_COLLECTION'])
    app.services['history'] = HistoryLogSearchService(
        repository=app.services['history_logs'],
        context_builder=ContextBuilder(
            boarding_service=app.services['boardings'],
            pricing_service=app.services['pricing'],
            pet_service=app.services['pets'],
            owner_service=app.services['owners'],
            request_service=app.services['requests']
        )
    )
    logging.info("History log services initialized successfully")

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(history_bp, url_prefix='/api/history')

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error_code": "VALIDATION_ERROR", "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 라우팅 404 등 HTTP 예외는 그대로 반환
        if isinstance(err, HTTPException):
            return jsonify({"error_code": err.name.upper().replace(" ", "_")}), err.code
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        response = {"error_code": "INTERNAL_SERVER_ERROR", "message": "서버 내부에서 예상치 못한 오류가 발생했습니다."}
        return jsonify(response), 500

    # =====================================================================================
    # 8. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
