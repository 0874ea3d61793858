# social_feed/api/publications/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from social_feed.api.publications.schemas import PublicationSchema, PublicationUpdateSchema
from social_feed.api.publications.services import PublicationNotFoundError


publications_bp = Blueprint('publications_bp', __name__)

@publications_bp.route('', methods=['GET'])
def get_publications():
    """전체 게시글 목록을 조회합니다."""
    publication_service = current_app.services['publications']
    try:
        publications = publication_service.list_publications()
        return jsonify(publications), 200
    except Exception as e:
        logging.error(f"Error fetching publications: {e}", exc_info=True)
        return jsonify({"error": "Failed to fetch publications"}), 500


@publications_bp.route('/user', methods=['GET'])
def get_user_publications():
    """
    특정 사용자의 게시글 목록을 조회합니다.
    - userId 쿼리 파라미터가 없으면 전체 목록을 반환합니다.
    """
    publication_service = current_app.services['publications']
    user_id = request.args.get('userId', None, type=str)
    try:
        publications = publication_service.list_publications_by_user(user_id)
        return jsonify(publications), 200
    except Exception as e:
        logging.error(f"Error fetching publications (userId: {user_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to fetch publications"}), 500


@publications_bp.route('', methods=['POST'])
def create_publication():
    publication_service = current_app.services['publications']
    """
    새로운 게시글을 생성합니다.
    - 성공 시, 생성된 문서 ID와 요청 본문을 201 Created 상태 코드와 함께 반환합니다.
    """
    try:
        payload = request.get_json(silent=True)
        # 본문이 없는 요청은 빈 객체로 취급합니다.
        data = PublicationSchema().load({} if payload is None else payload)
        new_publication = publication_service.create_publication(data)
        return jsonify(new_publication), 201
    except ValidationError as err:
        return jsonify({"error": "Invalid request body", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"Error adding publication: {e}", exc_info=True)
        return jsonify({"error": "Failed to add publication"}), 500


@publications_bp.route('/<string:publication_id>', methods=['PUT'])
def update_publication(publication_id: str):
    """게시글 필드를 부분 병합합니다. 존재하지 않는 게시글이면 404를 반환합니다."""
    publication_service = current_app.services['publications']
    try:
        payload = request.get_json(silent=True)
        # 본문이 없는 요청은 빈 객체로 취급합니다.
        data = PublicationUpdateSchema().load({} if payload is None else payload)
        publication_service.update_publication(publication_id, data)
        return jsonify({"message": "Publication updated successfully"}), 200
    except ValidationError as err:
        return jsonify({"error": "Invalid request body", "details": err.messages}), 400
    except PublicationNotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except Exception as e:
        logging.error(f"Error updating publication (publication_id: {publication_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to update publication"}), 500


@publications_bp.route('/<string:publication_id>', methods=['DELETE'])
def delete_publication(publication_id: str):
    publication_service = current_app.services['publications']
    try:
        publication_service.delete_publication(publication_id)
        return jsonify({"message": "Publication deleted successfully"}), 200
    except Exception as e:
        logging.error(f"Error deleting publication (publication_id: {publication_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to delete publication"}), 500
