from pydantic import BaseModel, Field
from datetime import datetime


# Schema for displaying company details
class CompanyOut(BaseModel):
    id: str
    name: str
    country: str
    currency: str
    created_at: datetime = Field(alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


def company_to_out(company) -> CompanyOut:
    return CompanyOut(
        id=company.id,
        name=company.name,
        country=company.country,
        currency=company.currency,
        created_at=company.created_at,
    )
