# social_feed/__init__.py

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
from flask import Flask, jsonify
from flask_cors import CORS
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException

# - 설정
from social_feed.core.config import config_by_name
from social_feed.core.firebase import init_firebase

# - API 블루프린트
from social_feed.api.publications.routes import publications_bp
from social_feed.api.comments.routes import comments_bp
from social_feed.api.likes.routes import likes_bp
from social_feed.api.auth.routes import auth_bp

# - 서비스 모듈
from social_feed.api.publications.services import PublicationService
from social_feed.api.comments.services import CommentService
from social_feed.api.likes.services import LikeService
from social_feed.api.auth.services import AuthService
from social_feed.services.identity_toolkit_service import IdentityToolkitService


def create_app(config_name=None, db=None, auth_client=None, identity_toolkit=None):
    """
    Flask 애플리케이션 팩토리 함수.
    - db, auth_client, identity_toolkit을 주입하면 Firebase 초기화를 건너뜁니다 (테스트용).
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    if not app.debug:
        logging.basicConfig(level=app.config['LOG_LEVEL'], format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    # =====================================================================================
    # 4. 확장 기능 및 외부 서비스 초기화
    # =====================================================================================
    CORS(app, origins=app.config['CORS_ORIGINS'], methods=app.config['CORS_METHODS'])

    web_api_key = app.config.get('FIREBASE_WEB_API_KEY')
    if db is None or auth_client is None:
        web_api_key = init_firebase(app)
    if not web_api_key:
        logging.warning("Firebase Web API key is not configured. Signup/login token exchange will fail.")

    if identity_toolkit is None:
        identity_toolkit = IdentityToolkitService(
            api_key=web_api_key,
            base_url=app.config['IDENTITY_TOOLKIT_URL']
        )

    # =====================================================================================
    # 5. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    app.services = {}
    app.services['publications'] = PublicationService(db=db)
    app.services['comments'] = CommentService(db=db)
    app.services['likes'] = LikeService(db=db)
    app.services['auth'] = AuthService(
        identity_toolkit=identity_toolkit,
        auth_client=auth_client,
        verify_password=app.config['VERIFY_LOGIN_PASSWORD']
    )

    # =====================================================================================
    # 6. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(publications_bp, url_prefix='/publications')
    app.register_blueprint(comments_bp, url_prefix='/publications')
    app.register_blueprint(likes_bp, url_prefix='/publications')
    app.register_blueprint(auth_bp, url_prefix='/api')

    # =====================================================================================
    # 7. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        return jsonify({"error": "Invalid request body", "details": err.messages}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        # 404/405 등 라우팅 단계의 오류도 JSON으로 응답
        return jsonify({"error": err.name, "message": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify({"error": "Internal server error"}), 500

    # =====================================================================================
    # 8. 앱 반환
    # =====================================================================================
    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
