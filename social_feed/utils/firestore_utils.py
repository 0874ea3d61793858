# social_feed/utils/firestore_utils.py
from typing import Any, Dict, Iterable, List


def document_to_dict(doc) -> Dict[str, Any]:
    """Firestore 스냅샷을 API 응답 형식 {id, ...fields}로 변환합니다."""
    data = doc.to_dict() or {}
    return {'id': doc.id, **data}


def documents_to_list(docs: Iterable) -> List[Dict[str, Any]]:
    return [document_to_dict(doc) for doc in docs]
