from marshmallow import Schema, fields, validate, EXCLUDE
from restaurant_site.utils.enums import ReservationStatus

class CreateReservationSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=150))
    email = fields.Email(required=True)
    date = fields.Date(required=True)
    guests = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    requirements = fields.Str(load_default="", allow_none=True)

class ReservationStatusSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    status = fields.Str(required=True, validate=validate.OneOf([e.value for e in ReservationStatus]))

class ListReservationQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    page = fields.Int(load_default=1, validate=validate.Range(min=1))
    per_page = fields.Int(load_default=20, validate=validate.Range(min=1, max=100))
    status = fields.Str(allow_none=True, load_default=None, validate=validate.OneOf([e.value for e in ReservationStatus] + ["", None]))
    date = fields.Date(allow_none=True, load_default=None)
