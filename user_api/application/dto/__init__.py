from .user_dto import (
    UserRequest,
    UserResponse,
    ErrorResponse,
    decode_user_request,
    decode_user_filter,
    query_pairs,
)

__all__ = [
    "UserRequest",
    "UserResponse",
    "ErrorResponse",
    "decode_user_request",
    "decode_user_filter",
    "query_pairs",
]
