from marshmallow import Schema, fields, EXCLUDE

# Trimming and email case-folding happen in services.accounts.AccountStore


class UserRegisterSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    username = fields.String(load_default="")
    email = fields.String(load_default="")
    password = fields.String(load_default="", load_only=True)


class UserLoginSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    email = fields.String(load_default="")
    password = fields.String(load_default="", load_only=True)


class UserOutSchema(Schema):
    id = fields.String(allow_none=False)
    username = fields.String()
    email = fields.String()
    favorites = fields.List(fields.String())
