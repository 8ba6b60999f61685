from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..schemas import Receipt, ProcessResponse, PointsResponse
from ..services.scoring import compute_points
from ..store import ScoreStore, ReceiptNotFound, get_store
from ..utils.logging import logger


router = APIRouter(prefix="/receipts", tags=["receipts"])

async def receipt_body(request: Request) -> Receipt:
    """Decode the body as a Receipt whatever Content-Type the client sent."""
    raw = await request.body()
    try:
        return Receipt.model_validate_json(raw)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False))

@router.post("/process", response_model=ProcessResponse)
def process_receipt(receipt: Receipt = Depends(receipt_body),
                    store: ScoreStore = Depends(get_store)):
    result = compute_points(receipt)
    receipt_id = store.insert(result["points"])
    logger.info("Processed receipt %s (points=%s, reasons=%s)",
                receipt_id, result["points"], result["reasons"])
    return ProcessResponse(id=receipt_id)

@router.get("/{receipt_id}/points", response_model=PointsResponse)
def get_points(receipt_id: str, store: ScoreStore = Depends(get_store)):
    try:
        points = store.lookup(receipt_id)
    except ReceiptNotFound:
        logger.info("Points requested for unknown receipt %s", receipt_id)
        raise HTTPException(status_code=404, detail="No receipt found for that ID")
    return PointsResponse(points=points)
