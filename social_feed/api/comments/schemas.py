# social_feed/api/comments/schemas.py
from marshmallow import Schema, fields, INCLUDE


class CommentCreateSchema(Schema):
    """
    POST /publications/{publication_id}/comments
    댓글 본문은 그대로 저장되며, createdAt 값은 목록 정렬(최신순)에 사용됩니다.
    """
    class Meta:
        unknown = INCLUDE

    userId = fields.Raw(allow_none=True)
    createdAt = fields.Raw(allow_none=True)
