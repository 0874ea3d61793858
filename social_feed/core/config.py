# social_feed/core/config.py

import os
import json


def _env_flag(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 서비스 계정 JSON 문자열. 토큰 교환에 쓰이는 'webApiKey' 필드를 함께 담을 수 있습니다.
    FIREBASE_SERVICE_ACCOUNT = os.getenv('FIREBASE_SERVICE_ACCOUNT')
    # JSON 문자열 대신 서비스 계정 파일 경로를 지정할 수도 있습니다.
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
    FIREBASE_WEB_API_KEY = os.getenv('FIREBASE_WEB_API_KEY')
    IDENTITY_TOOLKIT_URL = os.getenv('IDENTITY_TOOLKIT_URL', 'https://identitytoolkit.googleapis.com/v1')

    # 켜면 로그인 시 Identity Toolkit으로 비밀번호를 실제로 검증합니다.
    VERIFY_LOGIN_PASSWORD = _env_flag('VERIFY_LOGIN_PASSWORD')

    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')
    CORS_METHODS = ['GET', 'POST', 'PUT', 'DELETE', 'PATCH']

    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3000))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """개발 환경 설정. 코드 변경 시 자동 재시작과 상세 에러 페이지를 사용합니다."""
    DEBUG = True


class TestingConfig(Config):
    """테스트 환경 설정. 외부 Firebase 대신 주입된 가짜 클라이언트를 사용합니다."""
    TESTING = True
    DEBUG = False
    FIREBASE_WEB_API_KEY = 'test-web-api-key'
    VERIFY_LOGIN_PASSWORD = False


class ProductionConfig(Config):
    DEBUG = False


config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)


def parse_service_account(app_config) -> dict:
    """
    설정에서 서비스 계정 정보를 읽어 dict로 반환합니다.
    FIREBASE_SERVICE_ACCOUNT(JSON 문자열)가 우선이며, 없으면 FIREBASE_CREDENTIALS_PATH 파일을 읽습니다.
    둘 다 없으면 빈 dict를 반환합니다.
    """
    raw = app_config.get('FIREBASE_SERVICE_ACCOUNT')
    if raw:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"FIREBASE_SERVICE_ACCOUNT is not valid JSON: {e}")

    cred_path = app_config.get('FIREBASE_CREDENTIALS_PATH')
    if cred_path:
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Firebase credentials file not found: {cred_path}")
        with open(cred_path, encoding='utf-8') as f:
            return json.load(f)

    return {}
