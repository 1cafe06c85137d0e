import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from stocktrack.api.deps import get_session, parse_id
from stocktrack.core.errors import CategoryInUse, NoUpdatesProvided, UniqueConstraintViolation
from stocktrack.schemas.auth import SessionUser
from stocktrack.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from stocktrack.schemas.response import MessageResponse
from stocktrack.services.category_service import (
    create_category,
    delete_category,
    get_all_categories,
    get_category_by_id,
    update_category,
)

log = logging.getLogger("uvicorn")

router = APIRouter()


@router.get("", response_model=List[CategoryResponse])
async def list_categories(session: SessionUser = Depends(get_session)):
    """Lists all categories, newest first."""
    try:
        categories = await get_all_categories()
        return [CategoryResponse.model_validate(c) for c in categories]
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to fetch categories") from e


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category_endpoint(payload: CategoryCreate, session: SessionUser = Depends(get_session)):
    try:
        category = await create_category(name=payload.name, description=payload.description)
        return CategoryResponse.model_validate(category)
    except UniqueConstraintViolation:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Category name already exists")
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to create category") from e


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category_endpoint(category_id: str, session: SessionUser = Depends(get_session)):
    cid = parse_id(category_id, "category")
    try:
        category = await get_category_by_id(cid)
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to fetch category") from e
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return CategoryResponse.model_validate(category)


@router.put("/{category_id}", response_model=CategoryResponse)
async def update_category_endpoint(
    category_id: str,
    payload: CategoryUpdate,
    session: SessionUser = Depends(get_session),
):
    """Updates name and/or description. Fields left out of the body are not touched."""
    cid = parse_id(category_id, "category")
    try:
        category = await update_category(cid, payload.model_dump(exclude_none=True))
    except NoUpdatesProvided as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except UniqueConstraintViolation:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Category name already exists")
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to update category") from e
    if not category:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category_endpoint(category_id: str, session: SessionUser = Depends(get_session)):
    """Deletes a category. Refused with 409 while inventory items still use its name."""
    cid = parse_id(category_id, "category")
    try:
        deleted = await delete_category(cid)
    except CategoryInUse as e:
        log.info(f"Refused to delete category {cid}: {e}")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail="Failed to delete category") from e
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found")
    return MessageResponse(message="Category deleted successfully")
