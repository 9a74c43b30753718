# api/varroa.py
"""
Varroa checks and treatments.
"""
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from utils.db import get_db
from utils.dependencies import get_current_user
from models.user import UserProfile
from schemas.varroa import (
    VarroaCheckCreate,
    VarroaCheckUpdate,
    VarroaCheckOut,
    VarroaTreatmentCreate,
    VarroaTreatmentUpdate,
    VarroaTreatmentOut,
)
from services import varroa_service

router = APIRouter(prefix="/varroa", tags=["varroa"])


# ============================================================================
# Checks
# ============================================================================

@router.get("/checks", response_model=list[VarroaCheckOut])
def get_checks(
        hive_id: int | None = Query(None, gt=0),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """Own checks, newest first, each with its infestation `level`"""
    return varroa_service.list_checks(db, user, hive_id)


@router.post("/checks", response_model=VarroaCheckOut, status_code=status.HTTP_201_CREATED)
def post_check(
        payload: VarroaCheckCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    """
    Record a mite count.

    infestation_rate = mites_count / sample_size × 100 when both are present
    and sample_size > 0.
    """
    return varroa_service.create_check(db, user, payload)


@router.get("/checks/{check_id}", response_model=VarroaCheckOut)
def get_check_by_id(
        check_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return varroa_service.get_check(db, user, check_id)


@router.patch("/checks/{check_id}", response_model=VarroaCheckOut)
def patch_check(
        check_id: int,
        payload: VarroaCheckUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return varroa_service.update_check(db, user, check_id, payload)


@router.delete("/checks/{check_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_check(
        check_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    varroa_service.delete_check(db, user, check_id)


# ============================================================================
# Treatments
# ============================================================================

@router.get("/treatments/products", response_model=list[str])
def get_treatment_products(
        db: Session = Depends(get_db),
        _: UserProfile = Depends(get_current_user),
):
    """Active values of the `varroa_treatment_product` dropdown"""
    return varroa_service.list_treatment_products(db)


@router.get("/treatments", response_model=list[VarroaTreatmentOut])
def get_treatments(
        hive_id: int | None = Query(None, gt=0),
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return varroa_service.list_treatments(db, user, hive_id)


@router.post("/treatments", response_model=VarroaTreatmentOut, status_code=status.HTTP_201_CREATED)
def post_treatment(
        payload: VarroaTreatmentCreate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return varroa_service.create_treatment(db, user, payload)


@router.get("/treatments/{treatment_id}", response_model=VarroaTreatmentOut)
def get_treatment_by_id(
        treatment_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return varroa_service.get_treatment(db, user, treatment_id)


@router.patch("/treatments/{treatment_id}", response_model=VarroaTreatmentOut)
def patch_treatment(
        treatment_id: int,
        payload: VarroaTreatmentUpdate,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    return varroa_service.update_treatment(db, user, treatment_id, payload)


@router.delete("/treatments/{treatment_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_treatment(
        treatment_id: int,
        db: Session = Depends(get_db),
        user: UserProfile = Depends(get_current_user),
):
    varroa_service.delete_treatment(db, user, treatment_id)
