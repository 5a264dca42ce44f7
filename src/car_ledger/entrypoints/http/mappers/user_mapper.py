from __future__ import annotations

from car_ledger.domain.user import User
from car_ledger.entrypoints.http.dtos.users import UserResponseDTO


class UserMapper:
    """Maps domain users to REST DTOs."""

    @staticmethod
    def to_user_response(user: User) -> UserResponseDTO:
        return UserResponseDTO(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            balance=str(user.balance),
        )
