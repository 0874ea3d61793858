# social_feed/conftest.py
"""
테스트 공용 픽스처.
Firestore / Firebase Auth / Identity Toolkit을 메모리 기반 가짜 객체로 대체하여
create_app()에 주입합니다. 실제 Firebase 프로젝트 없이 전체 API를 검증할 수 있습니다.
"""
import copy
import uuid
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from firebase_admin import auth as firebase_auth
from google.api_core.exceptions import NotFound

from social_feed import create_app
from social_feed.services.identity_toolkit_service import TokenExchangeError


# --- Firestore ---

class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return copy.deepcopy(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, store, path):
        self._store = store
        self._path = path
        self.id = path[-1]

    def get(self):
        return FakeSnapshot(self.id, self._store.get(self._path))

    def set(self, data):
        self._store[self._path] = copy.deepcopy(data)

    def update(self, data):
        if self._path not in self._store:
            raise NotFound(f"No document to update: {'/'.join(self._path)}")
        self._store[self._path].update(copy.deepcopy(data))

    def delete(self):
        self._store.pop(self._path, None)

    def collection(self, name):
        return FakeCollectionReference(self._store, self._path + (name,))


class FakeQuery:
    def __init__(self, store, path, filters=(), order=None):
        self._store = store
        self._path = path
        self._filters = filters
        self._order = order

    def where(self, field, op, value):
        assert op == '==', "only equality filters are supported"
        return FakeQuery(self._store, self._path, self._filters + ((field, value),), self._order)

    def order_by(self, field, direction='ASCENDING'):
        return FakeQuery(self._store, self._path, self._filters, (field, direction))

    def stream(self):
        depth = len(self._path) + 1
        docs = [
            FakeSnapshot(path[-1], copy.deepcopy(data))
            for path, data in self._store.items()
            if len(path) == depth and path[:-1] == self._path
        ]
        for field, value in self._filters:
            docs = [d for d in docs if d.to_dict().get(field) == value]
        if self._order:
            field, direction = self._order
            # Firestore와 동일하게 정렬 필드가 없는 문서는 결과에서 제외됩니다.
            docs = [d for d in docs if field in d.to_dict()]
            docs.sort(key=lambda d: d.to_dict()[field], reverse=(direction == 'DESCENDING'))
        return iter(docs)

    def get(self):
        return list(self.stream())


class FakeCollectionReference(FakeQuery):
    def __init__(self, store, path):
        super().__init__(store, path)

    def document(self, doc_id=None):
        return FakeDocumentReference(self._store, self._path + (doc_id or uuid.uuid4().hex[:20],))

    def add(self, data):
        doc_ref = self.document()
        doc_ref.set(data)
        return None, doc_ref


class FakeFirestore:
    def __init__(self):
        self.documents = {}

    def collection(self, name):
        return FakeCollectionReference(self.documents, (name,))


# --- Firebase Auth / Identity Toolkit ---

class FakeAuthClient:
    """firebase_admin.auth 모듈 중 서비스가 사용하는 함수만 흉내 냅니다."""
    def __init__(self):
        self.users = {}
        self.passwords = {}
        self.id_tokens = {}
        self.revoked_tokens = set()

    def create_user(self, email=None, password=None):
        if any(user.email == email for user in self.users.values()):
            raise firebase_auth.EmailAlreadyExistsError('The user with the provided email already exists', None, None)
        uid = f"uid-{len(self.users) + 1}"
        self.users[uid] = SimpleNamespace(uid=uid, email=email)
        self.passwords[uid] = password
        return self.users[uid]

    def get_user(self, uid):
        if uid not in self.users:
            raise firebase_auth.UserNotFoundError(f'No user record found for the provided user ID: {uid}.')
        return self.users[uid]

    def get_user_by_email(self, email):
        for user in self.users.values():
            if user.email == email:
                return user
        raise firebase_auth.UserNotFoundError(f'No user record found for the provided email: {email}.')

    def create_custom_token(self, uid):
        return f"custom:{uid}".encode('utf-8')

    def issue_id_token(self, uid):
        token = f"id-token-{uid}-{len(self.id_tokens) + 1}"
        self.id_tokens[token] = uid
        return token

    def verify_id_token(self, id_token, check_revoked=False):
        uid = self.id_tokens.get(id_token)
        if uid is None:
            raise firebase_auth.InvalidIdTokenError('Could not verify token signature.')
        if check_revoked and id_token in self.revoked_tokens:
            raise firebase_auth.RevokedIdTokenError('The Firebase ID token has been revoked.')
        return {'uid': uid, 'email': self.users[uid].email}

    def revoke_refresh_tokens(self, uid):
        self.revoked_tokens.update(token for token, owner in self.id_tokens.items() if owner == uid)


class FakeIdentityToolkit:
    def __init__(self, auth_client):
        self.auth_client = auth_client

    def sign_in_with_custom_token(self, custom_token):
        if isinstance(custom_token, bytes):
            custom_token = custom_token.decode('utf-8')
        uid = custom_token.split(':', 1)[1]
        return {'idToken': self.auth_client.issue_id_token(uid), 'refreshToken': 'refresh', 'expiresIn': '3600'}

    def sign_in_with_password(self, email, password):
        user = self.auth_client.get_user_by_email(email)
        if self.auth_client.passwords.get(user.uid) != password:
            raise TokenExchangeError('INVALID_PASSWORD')
        return {'idToken': self.auth_client.issue_id_token(user.uid), 'localId': user.uid}


def make_unavailable_db(error=None):
    """모든 읽기/쓰기 호출이 예외를 던지는 Firestore 목(mock)을 만듭니다."""
    error = error or RuntimeError("Firestore unavailable")
    db = MagicMock()
    publications = db.collection.return_value
    subcollection = publications.document.return_value.collection.return_value
    for ref in (publications, subcollection):
        ref.stream.side_effect = error
        ref.get.side_effect = error
        ref.add.side_effect = error
        ref.where.return_value.stream.side_effect = error
        ref.order_by.return_value.stream.side_effect = error
        for method in ('get', 'set', 'update', 'delete'):
            getattr(ref.document.return_value, method).side_effect = error
    return db


# --- Fixtures ---

@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def fake_auth():
    return FakeAuthClient()


@pytest.fixture
def app(fake_db, fake_auth):
    return create_app('testing', db=fake_db, auth_client=fake_auth, identity_toolkit=FakeIdentityToolkit(fake_auth))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def unavailable_client(fake_auth):
    """저장소 장애 상황을 재현하는 테스트 클라이언트."""
    app = create_app('testing', db=make_unavailable_db(), auth_client=fake_auth,
                     identity_toolkit=FakeIdentityToolkit(fake_auth))
    return app.test_client()
