# social_feed/api/likes/schemas.py
from marshmallow import Schema, fields, validate


class LikeCreateSchema(Schema):
    """POST /publications/{publication_id}/likes 요청 본문. userId는 좋아요 문서의 키로도 사용됩니다."""
    userId = fields.Str(required=True, validate=validate.Length(min=1))


class LikeCountResponseSchema(Schema):
    count = fields.Int(required=True)


class HasLikedResponseSchema(Schema):
    hasLiked = fields.Bool(required=True)
