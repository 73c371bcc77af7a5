"""Bank-holiday endpoints."""

from fastapi import APIRouter, HTTPException, Path

from api.schemas.responses import CountrySummary, HolidayList
from deliverypilot.calendars import get_definition, get_holidays_for_year, supported_countries

router = APIRouter(tags=["Holidays"])


@router.get("/countries", response_model=list[CountrySummary])
async def list_countries():
    """List countries available in the bank-holiday selector."""
    return [CountrySummary(code=code, name=name) for code, name in supported_countries().items()]


@router.get("/holidays/{code}/{year}", response_model=HolidayList)
async def get_holidays(code: str, year: int = Path(..., ge=1, le=9999)):
    """Public holidays for a country and year, as sorted ISO dates."""
    definition = get_definition(code)
    if definition is None:
        raise HTTPException(status_code=404, detail=f"Country '{code}' not supported")

    return HolidayList(
        code=definition.code,
        name=definition.name,
        year=year,
        holidays=get_holidays_for_year(definition.code, year),
    )
