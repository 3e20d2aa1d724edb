from marshmallow import Schema, fields, validate, EXCLUDE

class CreateFAQSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    question = fields.Str(required=True, validate=validate.Length(min=1, max=500))
    answer = fields.Str(required=True, validate=validate.Length(min=1))
    is_active = fields.Bool(load_default=True)
    sort_order = fields.Int(allow_none=True, load_default=None, validate=validate.Range(min=0))

class UpdateFAQSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    question = fields.Str(validate=validate.Length(min=1, max=500))
    answer = fields.Str(validate=validate.Length(min=1))
    is_active = fields.Bool()
    sort_order = fields.Int(validate=validate.Range(min=0))
