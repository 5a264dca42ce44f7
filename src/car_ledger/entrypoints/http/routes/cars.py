from fastapi import APIRouter, Depends

from car_ledger.entrypoints.http.dependencies import (
    get_add_malfunction_use_case,
    get_buy_car_use_case,
    get_change_color_use_case,
    get_fix_car_use_case,
    get_query_assets_use_case,
    get_query_cars_use_case,
    get_read_car_use_case,
)
from car_ledger.entrypoints.http.dtos.cars import (
    AddMalfunctionRequestDTO,
    AddMalfunctionResponseDTO,
    CarListResponseDTO,
    CarResponseDTO,
    CarsQueryDTO,
    ChangeColorRequestDTO,
    PurchaseRequestDTO,
    PurchaseResponseDTO,
    RawQueryRequestDTO,
    RepairResponseDTO,
)
from car_ledger.entrypoints.http.error_responses import ERROR_RESPONSES
from car_ledger.entrypoints.http.mappers.car_mapper import CarMapper
from car_ledger.use_cases.add_malfunction import AddMalfunction
from car_ledger.use_cases.buy_car import BuyCar
from car_ledger.use_cases.change_color import ChangeColor, ChangeColorRequest
from car_ledger.use_cases.fix_car import FixCar, FixCarRequest
from car_ledger.use_cases.query_assets import QueryAssets, QueryAssetsRequest
from car_ledger.use_cases.query_cars import QueryCars
from car_ledger.use_cases.read_car import ReadCar, ReadCarRequest

router = APIRouter(tags=["Cars"])


@router.get(
    "/cars",
    response_model=CarListResponseDTO,
    summary="Find cars",
    description="""
    List cars, optionally filtered by exact color and/or owner.

    ## Example
    ```
    GET /v1/cars?color=Black&owner=user2
    ```
    """,
    responses=ERROR_RESPONSES,
)
def get_cars(
    query: CarsQueryDTO = Depends(),
    use_case: QueryCars = Depends(get_query_cars_use_case),
) -> CarListResponseDTO:
    """Find cars endpoint following parse → execute → map → return pattern."""
    request = CarMapper.to_query_request(query)
    result = use_case.execute(request)
    return CarMapper.to_list_response(result)


@router.post(
    "/cars/query",
    response_model=CarListResponseDTO,
    summary="Run a rich query",
    description="""
    Run a caller-supplied selector as-is. No docType filter is added, so a
    selector that also matches users fails with DECODE_ERROR.

    ## Example
    ```
    {"query": "{\\"selector\\":{\\"model\\":\\"Mustang\\"}}"}
    ```
    """,
    responses=ERROR_RESPONSES,
)
def query_cars(
    body: RawQueryRequestDTO,
    use_case: QueryAssets = Depends(get_query_assets_use_case),
) -> CarListResponseDTO:
    result = use_case.execute(QueryAssetsRequest(query_string=body.query))
    return CarMapper.to_list_response(result)


@router.get(
    "/cars/{car_id}",
    response_model=CarResponseDTO,
    summary="Get a car",
    responses=ERROR_RESPONSES,
)
def get_car(
    car_id: str,
    use_case: ReadCar = Depends(get_read_car_use_case),
) -> CarResponseDTO:
    result = use_case.execute(ReadCarRequest(car_id=car_id))
    return CarMapper.to_car_response(result.car)


@router.patch(
    "/cars/{car_id}/color",
    response_model=CarResponseDTO,
    summary="Repaint a car",
    responses=ERROR_RESPONSES,
)
def change_color(
    car_id: str,
    body: ChangeColorRequestDTO,
    use_case: ChangeColor = Depends(get_change_color_use_case),
) -> CarResponseDTO:
    result = use_case.execute(ChangeColorRequest(car_id=car_id, color=body.color))
    return CarMapper.to_car_response(result.car)


@router.post(
    "/cars/{car_id}/malfunctions",
    response_model=AddMalfunctionResponseDTO,
    summary="Report a malfunction",
    description="""
    Append a malfunction to the car.

    If the accumulated repair cost would exceed the car price, the car is
    written off instead: it is deleted and `written_off` is true.
    """,
    responses=ERROR_RESPONSES,
)
def add_malfunction(
    car_id: str,
    body: AddMalfunctionRequestDTO,
    use_case: AddMalfunction = Depends(get_add_malfunction_use_case),
) -> AddMalfunctionResponseDTO:
    request = CarMapper.to_add_malfunction_request(car_id, body)
    result = use_case.execute(request)
    return CarMapper.to_add_malfunction_response(result)


@router.post(
    "/cars/{car_id}/purchase",
    response_model=PurchaseResponseDTO,
    summary="Buy a car",
    description="""
    Transfer the car to the buyer against payment to the current owner.

    Cars with reported malfunctions are only sold when
    `acknowledge_malfunctions` is true; the price then drops by the
    accumulated repair cost.
    """,
    responses=ERROR_RESPONSES,
)
def purchase_car(
    car_id: str,
    body: PurchaseRequestDTO,
    use_case: BuyCar = Depends(get_buy_car_use_case),
) -> PurchaseResponseDTO:
    result = use_case.execute(CarMapper.to_purchase_request(car_id, body))
    return CarMapper.to_purchase_response(result)


@router.post(
    "/cars/{car_id}/repair",
    response_model=RepairResponseDTO,
    summary="Repair a car",
    description="Clear every malfunction; the owner pays the mechanic the accumulated cost.",
    responses=ERROR_RESPONSES,
)
def repair_car(
    car_id: str,
    use_case: FixCar = Depends(get_fix_car_use_case),
) -> RepairResponseDTO:
    result = use_case.execute(FixCarRequest(car_id=car_id))
    return CarMapper.to_repair_response(result)
