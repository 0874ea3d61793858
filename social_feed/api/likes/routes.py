# social_feed/api/likes/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from social_feed.api.likes.schemas import LikeCreateSchema, LikeCountResponseSchema, HasLikedResponseSchema


likes_bp = Blueprint('likes_bp', __name__)

@likes_bp.route('/<string:publication_id>/likes', methods=['POST'])
def add_like(publication_id: str):
    """게시글에 좋아요를 추가합니다. 이미 누른 경우에도 201을 반환합니다 (덮어쓰기)."""
    like_service = current_app.services['likes']
    try:
        payload = request.get_json(silent=True)
        # 본문이 없는 요청은 빈 객체로 취급합니다.
        data = LikeCreateSchema().load({} if payload is None else payload)
        like_service.add_like(publication_id, data['userId'])
        return jsonify({"message": "Like added successfully"}), 201
    except ValidationError as err:
        return jsonify({"error": "Invalid request body", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"Error adding like (publication_id: {publication_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to add like"}), 500


@likes_bp.route('/<string:publication_id>/likes/<string:user_id>', methods=['DELETE'])
def remove_like(publication_id: str, user_id: str):
    like_service = current_app.services['likes']
    try:
        like_service.remove_like(publication_id, user_id)
        return jsonify({"message": "Like removed successfully"}), 200
    except Exception as e:
        logging.error(f"Error removing like (publication_id: {publication_id}, user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to remove like"}), 500


# 'count'는 정적 경로이므로 아래의 /likes/<user_id> 규칙보다 먼저 매칭됩니다.
@likes_bp.route('/<string:publication_id>/likes/count', methods=['GET'])
def get_like_count(publication_id: str):
    like_service = current_app.services['likes']
    try:
        count = like_service.count_likes(publication_id)
        return jsonify(LikeCountResponseSchema().dump({"count": count})), 200
    except Exception as e:
        logging.error(f"Error fetching likes count (publication_id: {publication_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to fetch likes count"}), 500


@likes_bp.route('/<string:publication_id>/likes/<string:user_id>', methods=['GET'])
def check_like(publication_id: str, user_id: str):
    """사용자의 좋아요 여부만 반환합니다."""
    like_service = current_app.services['likes']
    try:
        has_liked = like_service.has_liked(publication_id, user_id)
        return jsonify(HasLikedResponseSchema().dump({"hasLiked": has_liked})), 200
    except Exception as e:
        logging.error(f"Error checking like (publication_id: {publication_id}, user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to check like"}), 500
