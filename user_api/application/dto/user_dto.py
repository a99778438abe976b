# Standard library imports
from typing import List, Mapping, Optional, Sequence, Tuple

# External package imports
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Local application imports
from ...domain.exceptions import UserDecodeError
from ...domain.models.filter import UserFilter
from ...domain.models.user import User


class UserRequest(BaseModel):
    """DTO for create/update request bodies; missing keys decode to empty strings"""
    model_config = ConfigDict(populate_by_name=True, strict=True, extra="ignore")

    email: str = ""
    country: str = ""
    nickname: str = ""
    last_name: str = Field(default="", alias="lastName")
    first_name: str = Field(default="", alias="firstName")
    password: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def null_as_empty(cls, value):
        """A JSON null leaves the field empty, like a missing key"""
        return "" if value is None else value

    def to_domain(self) -> User:
        return User(
            id=None,
            email=self.email,
            country=self.country,
            nickname=self.nickname,
            last_name=self.last_name,
            first_name=self.first_name,
            password=self.password,
        )


class UserResponse(BaseModel):
    """DTO for user output; password is left out when empty"""
    model_config = ConfigDict(populate_by_name=True)

    email: str
    country: str
    nickname: str
    last_name: str = Field(alias="lastName")
    first_name: str = Field(alias="firstName")
    password: Optional[str] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            email=user.email,
            country=user.country,
            nickname=user.nickname,
            last_name=user.last_name,
            first_name=user.first_name,
            password=user.password or None,
        )

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    """DTO for every error body"""
    description: str


def decode_user_request(body: bytes) -> UserRequest:
    """
    Decode a raw JSON request body into a UserRequest
    
    Args:
        body: Raw request body
        
    Returns:
        Decoded UserRequest
        
    Raises:
        UserDecodeError: If the body is not a JSON object of string fields
    """
    try:
        return UserRequest.model_validate_json(body or b"null")
    except ValidationError as exception:
        errors = exception.errors(include_url=False)
        first = errors[0] if errors else {}
        location = ".".join(str(part) for part in first.get("loc", ()))
        detail = first.get("msg", str(exception))
        raise UserDecodeError(f"{location}: {detail}" if location else detail) from exception


_FILTER_PARAMS = {
    "email": "email",
    "country": "country",
    "nickname": "nickname",
    "lastName": "last_name",
    "firstName": "first_name",
}


def decode_user_filter(
    params: Sequence[Tuple[str, str]],
) -> Tuple[UserFilter, List[str]]:
    """
    Decode list query parameters into a UserFilter
    
    Unknown parameters do not fail the decode; they are returned so the
    caller can log them. Repeated parameters keep their first value.
    
    Args:
        params: Query string as (key, value) pairs, in order
        
    Returns:
        Tuple of (filter, list of problems found)
    """
    values = {}
    problems = []
    for key, value in params:
        attribute = _FILTER_PARAMS.get(key)
        if attribute is None:
            problems.append(f"schema: invalid path \"{key}\"")
            continue
        values.setdefault(attribute, value)
    return UserFilter(**values), problems


def query_pairs(query: Mapping) -> List[Tuple[str, str]]:
    """Flatten a multi-dict (e.g. starlette QueryParams) into ordered pairs"""
    if hasattr(query, "multi_items"):
        return list(query.multi_items())
    return list(query.items())
