from fastapi import APIRouter, Depends, HTTPException, status

from marketmate.deps import get_sale_repository
from marketmate.repositories import SaleRepository
from marketmate.schemas.sale import SaleCreate, SaleRead, SaleWithProduct

router = APIRouter(prefix="/api/sales", tags=["sales"])


@router.get("", response_model=list[SaleWithProduct])
async def list_sales(repository: SaleRepository = Depends(get_sale_repository)):
    return await repository.list_all()


@router.get("/{sale_id}", response_model=SaleRead)
async def get_sale(
    sale_id: str,
    repository: SaleRepository = Depends(get_sale_repository),
):
    sale = await repository.get(sale_id)
    if sale is None:
        raise HTTPException(status_code=404, detail="Sale not found")
    return sale


@router.post("", response_model=SaleRead, status_code=status.HTTP_201_CREATED)
async def create_sale(
    data: SaleCreate,
    repository: SaleRepository = Depends(get_sale_repository),
):
    return await repository.create(data)
