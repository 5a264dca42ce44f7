from fastapi import APIRouter, Depends

from car_ledger.entrypoints.http.dependencies import get_read_user_use_case
from car_ledger.entrypoints.http.dtos.users import UserResponseDTO
from car_ledger.entrypoints.http.error_responses import ERROR_RESPONSES
from car_ledger.entrypoints.http.mappers.user_mapper import UserMapper
from car_ledger.use_cases.read_user import ReadUser, ReadUserRequest

router = APIRouter(tags=["Users"])


@router.get(
    "/users/{user_id}",
    response_model=UserResponseDTO,
    summary="Get a user",
    responses=ERROR_RESPONSES,
)
def get_user(
    user_id: str,
    use_case: ReadUser = Depends(get_read_user_use_case),
) -> UserResponseDTO:
    result = use_case.execute(ReadUserRequest(user_id=user_id))
    return UserMapper.to_user_response(result.user)
