# tco.py
from pydantic import BaseModel

HOURS_MIN = 500
HOURS_MAX = 3000
HOURS_STEP = 500
YEARS = 7


class TcoBreakdown(BaseModel):
    diesel_annual_cost: float
    electricity_annual_cost: float
    annual_savings: float
    seven_year_savings: float


def calculate_savings(annual_hours=1000, diesel_cost_per_hour=400, electricity_cost_per_hour=100):
    """Diesel vs electric running cost for one vehicle."""
    diesel = diesel_cost_per_hour * annual_hours
    electricity = electricity_cost_per_hour * annual_hours
    annual = diesel - electricity
    return TcoBreakdown(
        diesel_annual_cost=diesel,
        electricity_annual_cost=electricity,
        annual_savings=annual,
        seven_year_savings=annual * YEARS,
    )
