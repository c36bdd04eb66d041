"""Career field reference routes (static data + CSV market data)."""

from fastapi import APIRouter, Depends

from ..dependencies import get_job_dataset
from .data import get_career_field, list_career_fields
from .dataset import DatasetJob, analyze_field_data, jobs_for_field
from .schemas import CareerField, MarketDataResponse

router = APIRouter(prefix="/career-fields", tags=["careers"])


@router.get("", response_model=list[CareerField])
def career_fields():
    return list_career_fields()


@router.get("/{field_id}", response_model=CareerField)
def career_field(field_id: str):
    return get_career_field(field_id)


@router.get("/{field_id}/market-data", response_model=MarketDataResponse)
def market_data(field_id: str, dataset: list[DatasetJob] = Depends(get_job_dataset)):
    """Aggregate of the bundled job dataset for one career field; stats is null when nothing matches."""
    field = get_career_field(field_id)
    stats = analyze_field_data(jobs_for_field(dataset, field.name))
    return MarketDataResponse(field=field.id, stats=stats)
