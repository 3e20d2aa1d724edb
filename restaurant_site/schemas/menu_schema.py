from marshmallow import Schema, fields, validate, pre_load, EXCLUDE

class MenuItemSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    category = fields.Str(load_default="", validate=validate.Length(max=100))
    name = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    description = fields.Str(load_default="", allow_none=True)
    price = fields.Str(load_default="", validate=validate.Length(max=50))

    @pre_load
    def coerce_price(self, data, **kwargs):
        # Admin forms send numbers; the column keeps the display text
        if isinstance(data, dict) and isinstance(data.get("price"), (int, float)):
            data = dict(data)
            data["price"] = str(data["price"])
        return data

class UpdateMenuPdfSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    title = fields.Str(validate=validate.Length(min=1, max=255))
    is_active = fields.Bool()
