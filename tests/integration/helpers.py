from typing import Optional

from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from authflow.domain.entities import Account


async def register(client: AsyncClient, payload: dict):
    return await client.post("/api/auth/register", json=payload)


async def login(client: AsyncClient, email: str, password: str):
    return await client.post("/api/auth/login", json={"email": email, "password": password})


async def load_account(db_session: AsyncSession, email: str) -> Optional[Account]:
    stmt = select(Account).where(Account.email == email).execution_options(populate_existing=True)
    result = await db_session.execute(stmt)
    return result.scalar_one_or_none()


async def count_accounts(db_session: AsyncSession) -> int:
    result = await db_session.execute(select(Account))
    return len(result.scalars().all())
