from marshmallow import Schema, fields, EXCLUDE


class FavoriteSchema(Schema):
    """Raw countryCode; normalization happens in services.favorites.normalize_code."""
    class Meta:
        unknown = EXCLUDE

    country_code = fields.String(data_key="countryCode", load_default="")


class FavoritesOutSchema(Schema):
    favorites = fields.List(fields.String())
