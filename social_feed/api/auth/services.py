# social_feed/api/auth/services.py
import logging
from typing import Dict, Any
from firebase_admin import auth as firebase_auth

from social_feed.services.identity_toolkit_service import IdentityToolkitService


class EmailAlreadyInUseError(Exception):
    """이미 가입된 이메일로 회원가입을 시도한 경우 발생합니다."""


class AuthService:
    """
    이메일/비밀번호 인증 흐름을 담당하는 서비스 클래스.
    - 사용자 계정과 토큰 검증/폐기는 Firebase Auth가 처리합니다.
    - 서버가 발급한 커스텀 토큰을 Identity Toolkit을 통해 ID 토큰으로 교환하여 클라이언트에 전달합니다.
    """
    def __init__(self, identity_toolkit: IdentityToolkitService, auth_client=None, verify_password: bool = False):
        self.auth_client = auth_client or firebase_auth
        self.identity_toolkit = identity_toolkit
        self.verify_password = verify_password

    @staticmethod
    def _user_info(user_record) -> Dict[str, Any]:
        return {"uid": user_record.uid, "email": user_record.email}

    def _issue_id_token(self, uid: str) -> str:
        custom_token = self.auth_client.create_custom_token(uid)
        data = self.identity_toolkit.sign_in_with_custom_token(custom_token)
        return data['idToken']

    def signup(self, email: str, password: str) -> Dict[str, Any]:
        """Firebase Auth에 사용자를 생성하고 즉시 사용할 수 있는 ID 토큰을 발급합니다."""
        try:
            user_record = self.auth_client.create_user(email=email, password=password)
        except firebase_auth.EmailAlreadyExistsError:
            raise EmailAlreadyInUseError(email)

        token = self._issue_id_token(user_record.uid)
        logging.info(f"회원가입 완료 (uid: {user_record.uid})")
        return {"token": token, "user": self._user_info(user_record)}

    def login(self, email: str, password: str) -> Dict[str, Any]:
        """
        이메일로 사용자를 조회하여 ID 토큰을 발급합니다.
        verify_password가 꺼져 있으면 비밀번호는 검증하지 않습니다 (기존 클라이언트 호환 동작).
        """
        user_record = self.auth_client.get_user_by_email(email)

        if self.verify_password:
            data = self.identity_toolkit.sign_in_with_password(email, password)
            token = data['idToken']
        else:
            token = self._issue_id_token(user_record.uid)

        return {"token": token, "user": self._user_info(user_record)}

    def logout(self, uid: str) -> None:
        """해당 사용자에게 발급된 모든 토큰을 폐기합니다."""
        self.auth_client.revoke_refresh_tokens(uid)
        logging.info(f"사용자 토큰 폐기 완료 (uid: {uid})")

    def get_user(self, uid: str) -> Dict[str, Any]:
        user_record = self.auth_client.get_user(uid)
        return self._user_info(user_record)
