"""
Sales summary use case.
"""
from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal
from typing import List

from shared.application import UseCase, UseCaseResult
from apps.orders.domain.repositories.order_repository import OrderRepository
from ..dtos.dashboard_dto import DailyRevenueDTO

DEFAULT_SALES_DAYS = 7


def day_label(day: date) -> str:
    return f"{day:%b} {day.day}"


@dataclass
class SalesSummaryUseCase(UseCase[date, List[DailyRevenueDTO]]):
    """
    Revenue per day for the ``days`` days ending on the given date.

    Every day in the window is present, oldest first; days without
    orders report zero.
    """

    order_repository: OrderRepository
    days: int = DEFAULT_SALES_DAYS

    def execute(self, input_dto: date) -> UseCaseResult[List[DailyRevenueDTO]]:
        first_day = input_dto - timedelta(days=self.days - 1)
        revenue = self.order_repository.revenue_by_day(since=first_day)

        window = [first_day + timedelta(days=offset) for offset in range(self.days)]
        return UseCaseResult.ok([
            DailyRevenueDTO(date=day, label=day_label(day), revenue=revenue.get(day, Decimal('0')))
            for day in window
        ])
