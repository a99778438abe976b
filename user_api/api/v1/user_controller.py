# Standard library imports
import logging
from typing import List

# External package imports
from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.user_dto import (
    UserResponse,
    decode_user_filter,
    decode_user_request,
    query_pairs,
)
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...core.logging import log_with_fields
from ...di.container import get_container

logger = logging.getLogger(__name__)

USERS_LOCATION_PREFIX = "v1/users"

router = APIRouter(tags=["users"])


def _empty_response(status_code: int, location: str = "") -> Response:
    headers = {"Location": location} if location else None
    return Response(status_code=status_code, headers=headers, media_type="application/json")


@router.get("", response_model=List[UserResponse], response_model_exclude_none=True)
async def list_users(request: Request) -> JSONResponse:
    """
    List users, optionally filtered by exact match on
    email, country, nickname, lastName and firstName
    
    Unknown query parameters are logged and ignored.
    
    Args:
        request: Incoming request (query string is decoded here)
        
    Returns:
        JSON array of users without passwords
    """
    user_filter, problems = decode_user_filter(query_pairs(request.query_params))
    if problems:
        log_with_fields(
            logger,
            request,
            "error",
            "Error in GET parameters " + "; ".join(problems),
            parameters=dict(request.query_params),
        )
    
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    users = await list_users_use_case.execute(user_filter)
    return JSONResponse(status_code=status.HTTP_200_OK, content=[user.to_json() for user in users])


@router.get("/{nickname}", response_model=UserResponse, response_model_exclude_none=True)
async def get_user(nickname: str) -> JSONResponse:
    """
    Get a user by nickname
    
    Args:
        nickname: Nickname of the user
        
    Returns:
        JSON object of the user, stored password hash included
    """
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    user = await get_user_use_case.execute(nickname)
    return JSONResponse(status_code=status.HTTP_200_OK, content=user.to_json())


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(request: Request) -> Response:
    """
    Create a user
    
    The body is a JSON object with email, country, nickname, lastName,
    firstName and password.
    
    Returns:
        Empty 201 response with Location: v1/users/{nickname}
    """
    user_request = decode_user_request(await request.body())
    
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    created = await create_user_use_case.execute(user_request)
    return _empty_response(
        status.HTTP_201_CREATED,
        location=f"{USERS_LOCATION_PREFIX}/{created.nickname}",
    )


@router.put("/{nickname}", status_code=status.HTTP_204_NO_CONTENT)
async def update_user(nickname: str, request: Request) -> Response:
    """
    Overwrite a user by nickname and publish the change
    
    Responds 204 whether or not a user matched; the change is only
    published when one did.
    
    Args:
        nickname: Nickname of the user to overwrite
        request: Incoming request carrying the new user body
    """
    user_request = decode_user_request(await request.body())
    
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    await update_user_use_case.execute(nickname, user_request)
    return _empty_response(status.HTTP_204_NO_CONTENT)


@router.delete("/{nickname}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(nickname: str) -> Response:
    """
    Delete a user by nickname; unknown nicknames also get 204
    
    Args:
        nickname: Nickname of the user to delete
    """
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    await delete_user_use_case.execute(nickname)
    return _empty_response(status.HTTP_204_NO_CONTENT)
