# api/tools.py
"""
Calculators. Nothing is stored.
"""
from fastapi import APIRouter, Depends, HTTPException, Path, status

from utils.dependencies import get_current_user
from utils.datetime_utils import today_local
from models.user import UserProfile
from schemas.tools import QueenAgeIn, QueenAgeOut, MarkingColorOut, InfestationIn, InfestationOut
from services.calculation_service import (
    calculate_queen_age,
    marking_color_for_year,
    calculate_infestation_rate,
    infestation_level,
)

router = APIRouter(prefix="/tools", tags=["tools"])


@router.post("/queen-age", response_model=QueenAgeOut)
def post_queen_age(
        payload: QueenAgeIn,
        _: UserProfile = Depends(get_current_user),
):
    """Queen age on `today` (default: local today) and her marking colour"""
    today = payload.today or today_local()
    try:
        age = calculate_queen_age(payload.birth_date, today)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {
        "birth_date": payload.birth_date,
        "today": today,
        "age": age,
        "marking_color": marking_color_for_year(payload.birth_date.year).value,
    }


@router.get("/marking-color/{year}", response_model=MarkingColorOut)
def get_marking_color(
        year: int = Path(..., ge=1900, le=2999),
        _: UserProfile = Depends(get_current_user),
):
    return {"year": year, "marking_color": marking_color_for_year(year).value}


@router.post("/infestation", response_model=InfestationOut)
def post_infestation(
        payload: InfestationIn,
        _: UserProfile = Depends(get_current_user),
):
    rate = calculate_infestation_rate(payload.mites_count, payload.sample_size)
    return {"infestation_rate": rate, "level": infestation_level(rate).value}
