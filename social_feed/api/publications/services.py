# social_feed/api/publications/services.py
import logging
from typing import Optional, Dict, Any, List

from firebase_admin import firestore
from google.api_core.exceptions import NotFound

from social_feed.utils import documents_to_list


class PublicationNotFoundError(Exception):
    """업데이트 대상 게시글이 존재하지 않을 때 발생합니다."""


class PublicationService:
    """
    게시글(publications 컬렉션) 관련 DB 작업을 담당하는 서비스 클래스.
    스키마를 강제하지 않으며, 요청 본문을 그대로 문서로 저장합니다.
    """
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.publications_ref = self.db.collection('publications')

    def list_publications(self) -> List[Dict[str, Any]]:
        """전체 게시글을 저장소 기본 순서로 반환합니다."""
        return documents_to_list(self.publications_ref.stream())

    def list_publications_by_user(self, user_id: Optional[str]) -> List[Dict[str, Any]]:
        """user_id가 주어지면 userId 필드로 필터링하고, 없으면 전체 목록을 반환합니다."""
        query = self.publications_ref
        if user_id:
            query = self.publications_ref.where('userId', '==', user_id)
        return documents_to_list(query.stream())

    def create_publication(self, data: Dict[str, Any]) -> Dict[str, Any]:
        _, doc_ref = self.publications_ref.add(data)
        return {'id': doc_ref.id, **data}

    def update_publication(self, publication_id: str, data: Dict[str, Any]) -> None:
        """
        기존 문서에 필드를 병합합니다. (전체 교체가 아닌 부분 업데이트)
        문서가 없으면 새로 만들지 않고 PublicationNotFoundError를 발생시킵니다.
        """
        try:
            self.publications_ref.document(publication_id).update(data)
        except NotFound:
            raise PublicationNotFoundError("Publication not found")

    def delete_publication(self, publication_id: str) -> None:
        # 없는 문서를 삭제해도 Firestore는 성공으로 처리합니다.
        self.publications_ref.document(publication_id).delete()
        logging.info(f"게시글 삭제 완료 (publication_id: {publication_id})")

