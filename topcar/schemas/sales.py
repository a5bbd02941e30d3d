# topcar/schemas/sales.py
from datetime import date

from topcar.schemas.common import CamelModel


class SalesSummary(CamelModel):
    today_revenue: float = 0.0
    today_appointments: int = 0
    week_revenue: float = 0.0
    week_appointments: int = 0
    month_revenue: float = 0.0
    month_appointments: int = 0
    pending_payments: float = 0.0
    completed_jobs: int = 0

    # derived ratios, 0 when the denominator is 0
    average_order_value: float = 0.0
    completion_rate: float = 0.0
    payment_collection_rate: float = 0.0


class DailySales(CamelModel):
    date: date
    total_revenue: float
    appointments_count: int
    completed_jobs: int
    pending_payments: float
    expenses: float
    net_profit: float
