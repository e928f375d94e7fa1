from typing import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from marketmate.db.database import Database
from marketmate.repositories import ProductRepository, SaleRepository
from marketmate.services.dashboard_service import DashboardService


def get_database(request: Request) -> Database:
    return request.app.state.db


async def get_session(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    async with database.session() as session:
        yield session


def get_product_repository(session: AsyncSession = Depends(get_session)) -> ProductRepository:
    return ProductRepository(session)


def get_sale_repository(session: AsyncSession = Depends(get_session)) -> SaleRepository:
    return SaleRepository(session)


def get_dashboard_service(session: AsyncSession = Depends(get_session)) -> DashboardService:
    return DashboardService(session)
