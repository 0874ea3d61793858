# social_feed/api/publications/schemas.py
from marshmallow import Schema, fields, INCLUDE, ValidationError, validates_schema


class PublicationSchema(Schema):
    """
    POST /publications, PUT /publications/{id} 요청 본문 스키마.
    - 게시글 필드는 클라이언트가 자유롭게 정의하므로 선언되지 않은 필드도 그대로 통과시킵니다.
    - JSON 객체가 아닌 본문(배열, 문자열 등)만 거부합니다.
    """
    class Meta:
        unknown = INCLUDE

    userId = fields.Raw(allow_none=True, metadata={"description": "작성자 ID (피드 필터링에 사용)"})


class PublicationUpdateSchema(PublicationSchema):
    """PUT /publications/{id} 요청 본문. 병합할 필드가 최소 하나 있어야 합니다."""

    @validates_schema
    def validate_not_empty(self, data, **kwargs):
        if not data:
            raise ValidationError("At least one field is required.")
