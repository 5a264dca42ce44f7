from fastapi import APIRouter, Depends, status

from car_ledger.entrypoints.http.dependencies import get_init_ledger_use_case
from car_ledger.entrypoints.http.dtos.ledger import InitLedgerResponseDTO
from car_ledger.entrypoints.http.error_responses import ERROR_RESPONSES
from car_ledger.use_cases.init_ledger import InitLedger

router = APIRouter(tags=["Ledger"])


@router.post(
    "/ledger/init",
    response_model=InitLedgerResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Seed the ledger",
    description="""
    Write the genesis users (user1..user3) and cars (car1..car6).

    Records with the same keys are overwritten, so calling this again resets
    balances, owners and malfunctions of the seeded records.
    """,
    responses=ERROR_RESPONSES,
)
def init_ledger(
    use_case: InitLedger = Depends(get_init_ledger_use_case),
) -> InitLedgerResponseDTO:
    result = use_case.execute()
    return InitLedgerResponseDTO(
        user_ids=[user.id for user in result.users],
        car_ids=[car.id for car in result.cars],
    )
