"""API Validation Schemas."""

from marshmallow import EXCLUDE, Schema, fields, validate


class CategorySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.Int(dump_only=True)
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    description = fields.Str(allow_none=True)
    image = fields.Url(allow_none=True, validate=validate.Length(max=255))
    color = fields.Str(
        validate=validate.Regexp(r"^#(?:[0-9a-fA-F]{3}){1,2}$", error="Color must be a hex value such as #6c757d")
    )
    icon = fields.Str(allow_none=True, validate=validate.Length(max=50))
    is_default = fields.Bool(dump_only=True)
    created_at = fields.DateTime(dump_only=True)
    updated_at = fields.DateTime(dump_only=True)
