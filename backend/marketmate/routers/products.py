from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from marketmate.deps import get_product_repository
from marketmate.repositories import ProductRepository
from marketmate.schemas.product import ProductCreate, ProductRead, ProductUpdate, StockStatus

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[ProductRead])
async def list_products(
    search: str | None = None,
    category: str | None = None,
    stock_status: StockStatus | None = Query(default=None, alias="stockStatus"),
    repository: ProductRepository = Depends(get_product_repository),
):
    return await repository.list_all(search=search, category=category, stock_status=stock_status)


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
):
    product = await repository.get(product_id)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
async def create_product(
    data: ProductCreate,
    repository: ProductRepository = Depends(get_product_repository),
):
    return await repository.create(data)


@router.patch("/{product_id}", response_model=ProductRead)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    repository: ProductRepository = Depends(get_product_repository),
):
    product = await repository.update(product_id, data)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: str,
    repository: ProductRepository = Depends(get_product_repository),
):
    if not await repository.delete(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
