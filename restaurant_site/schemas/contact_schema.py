from marshmallow import Schema, fields, validate, EXCLUDE
from restaurant_site.utils.enums import ContactStatus

class CreateContactSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    email = fields.Email(required=True)
    phone = fields.Str(load_default="", allow_none=True, validate=validate.Length(max=50))
    subject = fields.Str(required=True, validate=validate.Length(min=1, max=255))
    message = fields.Str(required=True, validate=validate.Length(min=1))

class ContactStatusSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    status = fields.Str(required=True, validate=validate.OneOf([e.value for e in ContactStatus]))
