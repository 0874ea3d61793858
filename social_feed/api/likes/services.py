# social_feed/api/likes/services.py
import logging
from firebase_admin import firestore


class LikeService:
    """
    좋아요 관련 DB 작업을 담당하는 서비스 클래스.
    - 좋아요 문서의 ID는 사용자 ID와 같으므로, 게시글당 사용자별 좋아요는 최대 1개입니다.
    - 좋아요 수는 별도 카운터 없이 하위 컬렉션 전체를 읽어서 계산합니다.
    """
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.publications_ref = self.db.collection('publications')

    def _likes_ref(self, publication_id: str):
        return self.publications_ref.document(publication_id).collection('likes')

    def add_like(self, publication_id: str, user_id: str) -> None:
        # 같은 사용자가 다시 누르면 덮어쓰기만 하므로 중복이 생기지 않습니다.
        self._likes_ref(publication_id).document(user_id).set({'userId': user_id})

    def remove_like(self, publication_id: str, user_id: str) -> None:
        self._likes_ref(publication_id).document(user_id).delete()
        logging.info(f"좋아요 취소 (publication_id: {publication_id}, user_id: {user_id})")

    def count_likes(self, publication_id: str) -> int:
        return len(self._likes_ref(publication_id).get())

    def has_liked(self, publication_id: str, user_id: str) -> bool:
        return self._likes_ref(publication_id).document(user_id).get().exists
