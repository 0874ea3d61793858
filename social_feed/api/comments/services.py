# social_feed/api/comments/services.py

from firebase_admin import firestore
from typing import Dict, Any, List

from social_feed.utils import documents_to_list


class CommentService:
    """
    댓글 관련 DB 작업을 담당하는 서비스 클래스.
    댓글은 publications/{publication_id}/comments 하위 컬렉션에 저장됩니다.
    """
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.publications_ref = self.db.collection('publications')

    def _comments_ref(self, publication_id: str):
        return self.publications_ref.document(publication_id).collection('comments')

    def create_comment(self, publication_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """부모 게시글의 존재 여부는 확인하지 않습니다."""
        _, doc_ref = self._comments_ref(publication_id).add(data)
        return {'id': doc_ref.id, **data}

    def get_comments_for_publication(self, publication_id: str) -> List[Dict[str, Any]]:
        """createdAt 내림차순(최신순)으로 댓글 목록을 조회합니다."""
        query = self._comments_ref(publication_id).order_by('createdAt', direction=firestore.Query.DESCENDING)
        return documents_to_list(query.stream())
