"""Per-request GraphQL context."""

from fastapi import Depends
from strawberry.fastapi import BaseContext

from employee_api.dependencies import get_auth_service, get_employee_service
from employee_api.security.auth import get_current_user_id
from employee_api.services.auth_service import AuthService
from employee_api.services.employee_service import EmployeeService


class GraphQLContext(BaseContext):
    """Services and caller identity available to resolvers."""

    def __init__(
        self,
        employee_service: EmployeeService,
        auth_service: AuthService,
        current_user_id: str | None = None,
    ) -> None:
        super().__init__()
        self.employee_service = employee_service
        self.auth_service = auth_service
        self.current_user_id = current_user_id


async def get_context(
    employee_service: EmployeeService = Depends(get_employee_service),
    auth_service: AuthService = Depends(get_auth_service),
    current_user_id: str | None = Depends(get_current_user_id),
) -> GraphQLContext:
    """Build the GraphQL context from FastAPI dependencies."""
    return GraphQLContext(
        employee_service=employee_service,
        auth_service=auth_service,
        current_user_id=current_user_id,
    )
