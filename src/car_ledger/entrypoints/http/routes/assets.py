from fastapi import APIRouter, Depends, Response, status

from car_ledger.entrypoints.http.dependencies import (
    get_asset_exists_use_case,
    get_delete_asset_use_case,
)
from car_ledger.entrypoints.http.dtos.ledger import AssetExistsResponseDTO
from car_ledger.entrypoints.http.error_responses import ERROR_RESPONSES
from car_ledger.use_cases.asset_exists import AssetExists, AssetExistsRequest
from car_ledger.use_cases.delete_asset import DeleteAsset, DeleteAssetRequest

router = APIRouter(tags=["Assets"])


@router.delete(
    "/assets/{asset_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an asset",
    description="Remove any record (car or user) by key. No type check is made.",
    responses=ERROR_RESPONSES,
)
def delete_asset(
    asset_id: str,
    use_case: DeleteAsset = Depends(get_delete_asset_use_case),
) -> Response:
    use_case.execute(DeleteAssetRequest(asset_id=asset_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/assets/{asset_id}/exists",
    response_model=AssetExistsResponseDTO,
    summary="Check whether a key exists",
    responses=ERROR_RESPONSES,
)
def asset_exists(
    asset_id: str,
    use_case: AssetExists = Depends(get_asset_exists_use_case),
) -> AssetExistsResponseDTO:
    result = use_case.execute(AssetExistsRequest(asset_id=asset_id))
    return AssetExistsResponseDTO(asset_id=asset_id, exists=result.exists)
