# social_feed/core/firebase.py
import logging
from typing import Optional

import firebase_admin
from firebase_admin import credentials
from flask import Flask

from social_feed.core.config import parse_service_account


def init_firebase(app: Flask) -> Optional[str]:
    """
    Firebase Admin SDK를 프로세스당 한 번만 초기화하고,
    토큰 교환에 사용할 Web API Key를 반환합니다.
    """
    service_account = parse_service_account(app.config)

    if not firebase_admin._apps:
        if not service_account:
            raise ValueError("Firebase service account is not configured (FIREBASE_SERVICE_ACCOUNT or FIREBASE_CREDENTIALS_PATH).")
        cred = credentials.Certificate(service_account)
        firebase_admin.initialize_app(cred)
        logging.info(f"Firebase app initialized (project: {service_account.get('project_id')})")

    return app.config.get('FIREBASE_WEB_API_KEY') or service_account.get('webApiKey')
