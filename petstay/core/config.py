# petstay/core/config.py

import os # 'os' 모듈: 환경 변수를 읽기 위해 사용합니다.

class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # Firebase 프로젝트 ID. 서비스 계정 파일에 포함되어 있지 않은 경우에만 필요합니다.
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')

    # Firestore 컬렉션 이름. 운영/테스트 데이터를 분리할 때 환경 변수로 덮어씁니다.
    ACTIVITY_LOG_COLLECTION = os.getenv('ACTIVITY_LOG_COLLECTION', 'activity_logs')
    BOARDING_COLLECTION = os.getenv('BOARDING_COLLECTION', 'boardings')
    PRICING_COLLECTION = os.getenv('PRICING_COLLECTION', 'boarding_pricing')
    PET_COLLECTION = os.getenv('PET_COLLECTION', 'pets')
    OWNER_COLLECTION = os.getenv('OWNER_COLLECTION', 'pet_owners')
    REQUEST_COLLECTION = os.getenv('REQUEST_COLLECTION', 'requests')
    EXTENSION_COLLECTION = os.getenv('EXTENSION_COLLECTION', 'boarding_extension')
    GROOMING_COLLECTION = os.getenv('GROOMING_COLLECTION', 'grooming_request')

class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    # 개발용 Firebase 프로젝트에 연결하기 위한 서비스 계정 키 파일 경로
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH')

class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')

class ProductionConfig(Config):
    """운영 환경 설정 클래스입니다."""
    DEBUG = False
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')

# config_by_name: FLASK_ENV 값('development', 'testing', 'production')과 설정 클래스를 매핑합니다.
# app 팩토리(petstay/__init__.py)의 create_app 함수에서 사용됩니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
