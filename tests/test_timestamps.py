from datetime import timedelta

import pytest

from eportal.core.timeutils import utcnow
from eportal.models.academic import Faculty


@pytest.mark.asyncio
async def test_rows_store_naive_utc(session):
    before = utcnow()
    faculty = Faculty(name="Law", code="LAW")
    session.add(faculty)
    await session.commit()
    await session.refresh(faculty)

    assert faculty.created_at.tzinfo is None
    assert before - timedelta(seconds=1) <= faculty.created_at <= utcnow() + timedelta(seconds=1)

    faculty.name = "Faculty of Law"
    await session.commit()
    await session.refresh(faculty)
    assert faculty.updated_at >= faculty.created_at
