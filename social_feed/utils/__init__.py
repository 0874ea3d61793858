# social_feed/utils/__init__.py
from .firestore_utils import document_to_dict, documents_to_list

__all__ = ['document_to_dict', 'documents_to_list']
