from pydantic import BaseModel


class InitLedgerResponseDTO(BaseModel):
    user_ids: list[str]
    car_ids: list[str]


class AssetExistsResponseDTO(BaseModel):
    asset_id: str
    exists: bool
