from pydantic import BaseModel


class UserResponseDTO(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    balance: str
