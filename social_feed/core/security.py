import logging
from functools import wraps
from flask import request, jsonify, g, current_app


def firebase_auth_required(f):
    """
    Authorization 헤더의 Firebase ID 토큰을 검증하고, 해독된 클레임을 g.user에 저장합니다.
    토큰 누락/만료/폐기/형식 오류 모두 동일한 401 응답을 반환합니다.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get("Authorization", "")
        id_token = auth_header.split("Bearer ")[1].strip() if auth_header.startswith("Bearer ") else None
        if not id_token:
            return jsonify({"message": "Unauthorized access"}), 401

        auth_client = current_app.services['auth'].auth_client
        try:
            # logout으로 폐기된 토큰도 거부하도록 check_revoked를 켭니다.
            g.user = auth_client.verify_id_token(id_token, check_revoked=True)
        except Exception as e:
            logging.warning(f"Token verification error: {e}")
            return jsonify({"message": "Unauthorized access"}), 401

        return f(*args, **kwargs)

    return decorated_function
