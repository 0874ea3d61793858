#social_feed/api/auth/schemas.py
from marshmallow import Schema, fields, validate


class CredentialsSchema(Schema):
    """회원가입/로그인 요청의 유효성을 검사하는 스키마"""
    email = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))


class UserSchema(Schema):
    """응답에 포함될 사용자 정보. Firebase Auth 레코드의 uid/email만 노출합니다."""
    uid = fields.Str(required=True)
    email = fields.Str(allow_none=True)


class AuthResponseSchema(Schema):
    message = fields.Str(required=True)
    token = fields.Str(required=True)
    user = fields.Nested(UserSchema, required=True)


class CurrentUserResponseSchema(Schema):
    user = fields.Nested(UserSchema, required=True)
