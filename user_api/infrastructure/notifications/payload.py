"""JSON message body for user-changed events"""

import json

from ...domain.constants import UserFields
from ...domain.models.user import User


def user_to_message(user: User) -> dict:
    """Full user as published, password hash included when set; never the store id"""
    message = {
        UserFields.EMAIL: user.email,
        UserFields.COUNTRY: user.country,
        UserFields.NICKNAME: user.nickname,
        UserFields.LAST_NAME: user.last_name,
        UserFields.FIRST_NAME: user.first_name,
    }
    if user.password:
        message[UserFields.PASSWORD] = user.password
    return message


def serialize_user(user: User) -> str:
    return json.dumps(user_to_message(user), separators=(",", ":"))
