from pydantic import BaseModel, ConfigDict, Field

MONEY_PATTERN = r"^-?\d+(\.\d{1,2})?$"


class MalfunctionDTO(BaseModel):
    description: str
    price: str


class CarResponseDTO(BaseModel):
    id: str
    brand: str
    model: str
    year: str
    color: str
    owner: str
    price: str
    malfunctions: list[MalfunctionDTO]
    malfunction_cost: str


class CarListResponseDTO(BaseModel):
    cars: list[CarResponseDTO]
    total: int


class CarsQueryDTO(BaseModel):
    """Query parameters for finding cars by color and/or owner."""

    color: str | None = Field(
        default=None,
        description="Filter by exact color (case-sensitive)",
        examples=["Black"],
    )
    owner: str | None = Field(
        default=None,
        description="Filter by owner user id",
        examples=["user1"],
    )


class RawQueryRequestDTO(BaseModel):
    """Caller-supplied rich query, passed through as-is."""

    query: str = Field(
        description="JSON document with a 'selector' object",
        examples=['{"selector":{"model":"Mustang"}}'],
    )


class ChangeColorRequestDTO(BaseModel):
    color: str = Field(min_length=1, examples=["Black"])


class AddMalfunctionRequestDTO(BaseModel):
    """Request payload for reporting a malfunction."""

    description: str = Field(min_length=1, examples=["Flat tires"])
    price: str = Field(
        description="Repair cost as decimal string (must be > 0)",
        examples=["850.00"],
        pattern=MONEY_PATTERN,
    )

    model_config = ConfigDict(
        json_schema_extra={"example": {"description": "Flat tires", "price": "850.00"}}
    )


class AddMalfunctionResponseDTO(BaseModel):
    written_off: bool = Field(
        description="True when accumulated repair cost exceeded the car price and the car was deleted"
    )
    car: CarResponseDTO | None = None


class PurchaseRequestDTO(BaseModel):
    """Request payload for buying a car."""

    buyer_id: str = Field(min_length=1, examples=["user1"])
    acknowledge_malfunctions: bool = Field(
        default=False,
        description="Buyer accepts reported malfunctions in exchange for a reduced price",
    )


class PurchaseResponseDTO(BaseModel):
    car: CarResponseDTO
    seller_id: str
    buyer_id: str
    price_paid: str


class RepairResponseDTO(BaseModel):
    car: CarResponseDTO
    owner_id: str
    mechanic_id: str
    repair_cost: str
