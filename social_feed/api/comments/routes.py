# social_feed/api/comments/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from social_feed.api.comments.schemas import CommentCreateSchema


comments_bp = Blueprint('comments_bp', __name__)

@comments_bp.route('/<string:publication_id>/comments', methods=['POST'])
def create_comment(publication_id: str):
    comment_service = current_app.services['comments']
    """
    특정 게시글에 새로운 댓글을 작성합니다.
    - 성공 시, 생성된 댓글 정보를 201 Created 상태 코드와 함께 반환합니다.
    """
    try:
        payload = request.get_json(silent=True)
        # 본문이 없는 요청은 빈 객체로 취급합니다.
        data = CommentCreateSchema().load({} if payload is None else payload)
        new_comment = comment_service.create_comment(publication_id, data)
        return jsonify(new_comment), 201
    except ValidationError as err:
        return jsonify({"error": "Invalid request body", "details": err.messages}), 400
    except Exception as e:
        logging.error(f"Error adding comment (publication_id: {publication_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to add comment"}), 500


@comments_bp.route('/<string:publication_id>/comments', methods=['GET'])
def get_comments(publication_id: str):
    comment_service = current_app.services['comments']
    try:
        comments = comment_service.get_comments_for_publication(publication_id)
        return jsonify(comments), 200
    except Exception as e:
        logging.error(f"Error fetching comments (publication_id: {publication_id}): {e}", exc_info=True)
        return jsonify({"error": "Failed to fetch comments"}), 500
