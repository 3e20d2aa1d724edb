from marshmallow import Schema, fields, validate, EXCLUDE

class LoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, validate=validate.Length(min=1))
    password = fields.Str(required=True, validate=validate.Length(min=1))

class RefreshSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    refresh_token = fields.Str(required=True, validate=validate.Length(min=1))

class ChangePasswordSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    current_password = fields.Str(required=True, validate=validate.Length(min=1))
    new_password = fields.Str(required=True, validate=validate.Length(min=8, error="New password must be at least 8 characters"))
