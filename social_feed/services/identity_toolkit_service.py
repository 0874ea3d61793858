# social_feed/services/identity_toolkit_service.py

import logging
from typing import Optional, Union

import requests


class TokenExchangeError(Exception):
    """Identity Toolkit 응답에 idToken이 없을 때 발생합니다."""


class IdentityToolkitService:
    """
    Firebase Identity Toolkit REST API 통신을 담당하는 서비스 클래스입니다.
    Admin SDK가 발급한 커스텀 토큰을 클라이언트가 사용할 ID 토큰으로 교환합니다.
    """
    def __init__(self, api_key: Optional[str], base_url: str = 'https://identitytoolkit.googleapis.com/v1',
                 session: Optional[requests.Session] = None):
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()

    def _post(self, action: str, payload: dict) -> dict:
        if not self.api_key:
            raise TokenExchangeError("Web API key is not configured")

        response = self.session.post(
            f"{self.base_url}/accounts:{action}",
            params={'key': self.api_key},
            json=payload
        )
        data = response.json()

        if not data.get('idToken'):
            error_message = (data.get('error') or {}).get('message', 'idToken missing from response')
            logging.error(f"Identity Toolkit {action} 실패 (status: {response.status_code}): {error_message}")
            raise TokenExchangeError(error_message)
        return data

    def sign_in_with_custom_token(self, custom_token: Union[str, bytes]) -> dict:
        """커스텀 토큰을 ID 토큰으로 교환합니다. 응답에는 idToken, refreshToken, expiresIn이 포함됩니다."""
        if isinstance(custom_token, bytes):
            custom_token = custom_token.decode('utf-8')
        return self._post('signInWithCustomToken', {'token': custom_token, 'returnSecureToken': True})

    def sign_in_with_password(self, email: str, password: str) -> dict:
        return self._post('signInWithPassword', {'email': email, 'password': password, 'returnSecureToken': True})
