from marshmallow import Schema, fields, validate, EXCLUDE

class CreateGalleryImageSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    url = fields.Str(required=True, validate=validate.Length(min=1, max=1000))
    alt = fields.Str(load_default="", validate=validate.Length(max=255))
    title = fields.Str(load_default="", validate=validate.Length(max=255))
    sort_order = fields.Int(allow_none=True, load_default=None)

class UpdateGalleryImageSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    url = fields.Str(validate=validate.Length(min=1, max=1000))
    alt = fields.Str(validate=validate.Length(max=255))
    title = fields.Str(validate=validate.Length(max=255))
    sort_order = fields.Int()
