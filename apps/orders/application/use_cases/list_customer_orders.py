"""
List customer orders use case.
"""
from dataclasses import dataclass
from typing import List

from shared.application import UseCase, UseCaseResult
from shared.domain.exceptions import ValidationError
from ...domain.repositories.order_repository import OrderRepository
from ..dtos.order_dto import OrderDTO


@dataclass
class ListCustomerOrdersUseCase(UseCase[str, List[OrderDTO]]):
    """Order history for the email given at checkout."""

    order_repository: OrderRepository

    def execute(self, input_dto: str) -> UseCaseResult[List[OrderDTO]]:
        email = (input_dto or '').strip()
        if not email:
            raise ValidationError("Email required", field="email")
        orders = self.order_repository.find_by_customer_email(email)
        return UseCaseResult.ok([OrderDTO.from_entity(order) for order in orders])
