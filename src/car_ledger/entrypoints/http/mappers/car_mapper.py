from __future__ import annotations

from decimal import Decimal, InvalidOperation

from car_ledger.domain.car import Car
from car_ledger.domain.errors import ValidationError
from car_ledger.domain.selectors import CarSelector
from car_ledger.entrypoints.http.dtos.cars import (
    AddMalfunctionRequestDTO,
    AddMalfunctionResponseDTO,
    CarListResponseDTO,
    CarResponseDTO,
    CarsQueryDTO,
    MalfunctionDTO,
    PurchaseRequestDTO,
    PurchaseResponseDTO,
    RepairResponseDTO,
)
from car_ledger.use_cases.add_malfunction import AddMalfunctionRequest, AddMalfunctionResponse
from car_ledger.use_cases.buy_car import BuyCarRequest, BuyCarResponse
from car_ledger.use_cases.fix_car import FixCarResponse
from car_ledger.use_cases.query_cars import QueryCarsRequest, QueryCarsResponse


class CarMapper:
    """Maps between REST DTOs and domain models for car operations."""

    @staticmethod
    def to_query_request(dto: CarsQueryDTO) -> QueryCarsRequest:
        return QueryCarsRequest(selector=CarSelector(color=dto.color, owner=dto.owner))

    @staticmethod
    def to_add_malfunction_request(
        car_id: str, dto: AddMalfunctionRequestDTO
    ) -> AddMalfunctionRequest:
        """
        Converts request DTO to domain AddMalfunctionRequest.

        Handles string → Decimal conversion at the boundary.

        Raises:
            ValidationError: If price cannot be converted to a valid Decimal
        """
        try:
            price = Decimal(dto.price)
        except (InvalidOperation, ValueError):
            raise ValidationError(
                errors=[
                    {
                        "field": "price",
                        "message": "Must be a valid decimal",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            )

        return AddMalfunctionRequest(car_id=car_id, description=dto.description, price=price)

    @staticmethod
    def to_purchase_request(car_id: str, dto: PurchaseRequestDTO) -> BuyCarRequest:
        return BuyCarRequest(
            car_id=car_id,
            buyer_id=dto.buyer_id,
            acknowledge_malfunctions=dto.acknowledge_malfunctions,
        )

    @staticmethod
    def to_car_response(car: Car) -> CarResponseDTO:
        """
        Converts domain Car entity to REST response DTO.

        Decimal → str at the boundary.
        """
        return CarResponseDTO(
            id=car.id,
            brand=car.brand,
            model=car.model,
            year=car.year,
            color=car.color,
            owner=car.owner,
            price=str(car.price),
            malfunctions=[
                MalfunctionDTO(description=malfunction.description, price=str(malfunction.price))
                for malfunction in car.malfunctions
            ],
            malfunction_cost=str(car.malfunction_cost),
        )

    @staticmethod
    def to_list_response(result: QueryCarsResponse) -> CarListResponseDTO:
        return CarListResponseDTO(
            cars=[CarMapper.to_car_response(car) for car in result.cars],
            total=len(result.cars),
        )

    @staticmethod
    def to_add_malfunction_response(result: AddMalfunctionResponse) -> AddMalfunctionResponseDTO:
        return AddMalfunctionResponseDTO(
            written_off=result.written_off,
            car=CarMapper.to_car_response(result.car) if result.car is not None else None,
        )

    @staticmethod
    def to_purchase_response(result: BuyCarResponse) -> PurchaseResponseDTO:
        return PurchaseResponseDTO(
            car=CarMapper.to_car_response(result.car),
            seller_id=result.seller.id,
            buyer_id=result.buyer.id,
            price_paid=str(result.price_paid),
        )

    @staticmethod
    def to_repair_response(result: FixCarResponse) -> RepairResponseDTO:
        return RepairResponseDTO(
            car=CarMapper.to_car_response(result.car),
            owner_id=result.owner.id,
            mechanic_id=result.mechanic.id,
            repair_cost=str(result.repair_cost),
        )
