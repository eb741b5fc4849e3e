"""
Standard claim names (OpenID Connect Core 1.0, 5.1).
"""


class StandardClaims:
    """Names of the standard claims."""
    SUB = "sub"
    NAME = "name"
    GIVEN_NAME = "given_name"
    FAMILY_NAME = "family_name"
    MIDDLE_NAME = "middle_name"
    NICKNAME = "nickname"
    PREFERRED_USERNAME = "preferred_username"
    PROFILE = "profile"
    PICTURE = "picture"
    WEBSITE = "website"
    EMAIL = "email"
    EMAIL_VERIFIED = "email_verified"
    GENDER = "gender"
    BIRTHDATE = "birthdate"
    ZONEINFO = "zoneinfo"
    LOCALE = "locale"
    PHONE_NUMBER = "phone_number"
    PHONE_NUMBER_VERIFIED = "phone_number_verified"
    ADDRESS = "address"
    UPDATED_AT = "updated_at"

    @classmethod
    def all(cls):
        return [value for key, value in vars(cls).items()
                if key.isupper() and isinstance(value, str)]

    @classmethod
    def is_standard(cls, name) -> bool:
        return name in cls.all()
