# social_feed/api/auth/routes.py

import logging
from flask import Blueprint, request, jsonify, current_app, g
from marshmallow import ValidationError

from social_feed.api.auth.schemas import CredentialsSchema, AuthResponseSchema, CurrentUserResponseSchema
from social_feed.api.auth.services import EmailAlreadyInUseError
from social_feed.core.security import firebase_auth_required

auth_bp = Blueprint('auth_bp', __name__)

@auth_bp.route('/signup', methods=['POST'])
def signup():
    """이메일/비밀번호로 회원가입 후 ID 토큰을 발급합니다."""
    auth_service = current_app.services['auth']
    try:
        data = CredentialsSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"message": "Missing required fields", "details": err.messages}), 400

    try:
        result = auth_service.signup(data['email'], data['password'])
        return jsonify(AuthResponseSchema().dump({"message": "User successfully created", **result})), 201
    except EmailAlreadyInUseError:
        return jsonify({"message": "An account with this email already exists"}), 400
    except Exception as e:
        logging.error(f"Signup error: {e}", exc_info=True)
        return jsonify({"message": "Error creating user"}), 500


@auth_bp.route('/login', methods=['POST'])
def login():
    """
    로그인. 사용자 조회, 토큰 교환 중 어떤 단계에서 실패하더라도
    계정 존재 여부가 드러나지 않도록 동일한 401 응답을 반환합니다.
    """
    auth_service = current_app.services['auth']
    try:
        data = CredentialsSchema().load(request.get_json(silent=True) or {})
    except ValidationError as err:
        return jsonify({"message": "Missing required fields", "details": err.messages}), 400

    try:
        result = auth_service.login(data['email'], data['password'])
        return jsonify(AuthResponseSchema().dump({"message": "Login successful", **result})), 200
    except Exception as e:
        logging.warning(f"Login error: {e}", exc_info=True)
        return jsonify({"message": "Invalid email or password"}), 401


@auth_bp.route('/logout', methods=['POST'])
@firebase_auth_required
def logout():
    auth_service = current_app.services['auth']
    try:
        auth_service.logout(g.user['uid'])
        return jsonify({"message": "Logout successful"}), 200
    except Exception as e:
        logging.error(f"Logout error: {e}", exc_info=True)
        return jsonify({"message": "Error during logout"}), 500


@auth_bp.route('/user', methods=['GET'])
@firebase_auth_required
def get_current_user():
    """현재 토큰 소유자의 uid/email을 Firebase Auth에서 다시 조회하여 반환합니다."""
    auth_service = current_app.services['auth']
    try:
        user = auth_service.get_user(g.user['uid'])
        return jsonify(CurrentUserResponseSchema().dump({"user": user})), 200
    except Exception as e:
        logging.error(f"Error fetching user: {e}", exc_info=True)
        return jsonify({"message": "Error fetching user data"}), 500
