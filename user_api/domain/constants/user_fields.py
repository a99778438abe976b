"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model (JSON keys and document keys)"""
    ID = "id"
    EMAIL = "email"
    COUNTRY = "country"
    NICKNAME = "nickname"
    LAST_NAME = "lastName"
    FIRST_NAME = "firstName"
    PASSWORD = "password"
    
    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
    
    # Declaration order; drives validation message order and serialization order
    PROFILE_FIELDS = (EMAIL, COUNTRY, NICKNAME, LAST_NAME, FIRST_NAME)
    ALL_FIELDS = PROFILE_FIELDS + (PASSWORD,)
