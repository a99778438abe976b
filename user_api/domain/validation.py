"""
Field validation for users submitted on create.

Every field is required; email must also be a syntactically valid
address. Violations are collected as (field, rule, message) tuples in
declaration order so the rendered description is deterministic.
"""
from typing import List, NamedTuple

from email_validator import EmailNotValidError, validate_email

from .constants import UserFields
from .models.user import User


class FieldViolation(NamedTuple):
    field: str
    rule: str
    message: str


# JSON field name -> (struct field name used in messages, User attribute)
_FIELD_NAMES = {
    UserFields.EMAIL: ("Email", "email"),
    UserFields.COUNTRY: ("Country", "country"),
    UserFields.NICKNAME: ("Nickname", "nickname"),
    UserFields.LAST_NAME: ("LastName", "last_name"),
    UserFields.FIRST_NAME: ("FirstName", "first_name"),
    UserFields.PASSWORD: ("Password", "password"),
}


def _violation(field: str, rule: str) -> FieldViolation:
    name = _FIELD_NAMES[field][0]
    return FieldViolation(
        field=field,
        rule=rule,
        message=f"Key: 'User.{name}' Error:Field validation for '{name}' failed on the '{rule}' tag",
    )


def is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def validate_user(user: User) -> List[FieldViolation]:
    """
    Check a user against the field rules
    
    Args:
        user: Decoded user, password still in plain text
        
    Returns:
        Violations ordered email, country, nickname, lastName, firstName,
        password; empty when the user is valid
    """
    violations = []
    for field in UserFields.ALL_FIELDS:
        value = getattr(user, _FIELD_NAMES[field][1])
        if not value:
            violations.append(_violation(field, "required"))
        elif field == UserFields.EMAIL and not is_valid_email(value):
            violations.append(_violation(field, "email"))
    return violations
