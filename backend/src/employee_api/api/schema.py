"""GraphQL schema: employee and user queries and mutations."""

import strawberry
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig
from strawberry.types import Info

from employee_api.api.context import GraphQLContext, get_context
from employee_api.api.errors import run_operation, should_mask_error
from employee_api.api.types import AuthPayloadType, EmployeeType, UserType
from employee_api.models.dto.employee import EmployeeCreate, EmployeeUpdate


@strawberry.type
class Query:
    """Read operations."""

    @strawberry.field(name="getAllEmployees")
    async def get_all_employees(self, info: Info[GraphQLContext, None]) -> list[EmployeeType]:
        service = info.context.employee_service
        employees = await run_operation(service.list_employees())
        return [EmployeeType.from_domain(employee) for employee in employees]

    @strawberry.field(name="searchEmployeeById")
    async def search_employee_by_id(
        self, info: Info[GraphQLContext, None], id: strawberry.ID
    ) -> EmployeeType | None:
        service = info.context.employee_service
        employee = await run_operation(service.get_employee(str(id)))
        return EmployeeType.from_domain(employee)

    @strawberry.field(name="searchEmployee")
    async def search_employee(
        self,
        info: Info[GraphQLContext, None],
        designation: str | None = None,
        department: str | None = None,
    ) -> list[EmployeeType]:
        service = info.context.employee_service
        employees = await run_operation(
            service.search_employees(designation=designation, department=department)
        )
        return [EmployeeType.from_domain(employee) for employee in employees]

    @strawberry.field
    async def login(
        self,
        info: Info[GraphQLContext, None],
        password: str,
        username: str | None = None,
        email: str | None = None,
    ) -> AuthPayloadType | None:
        """Authenticate with a username or email and a password."""
        service = info.context.auth_service
        payload = await run_operation(service.login(username, password, email=email))
        return AuthPayloadType.from_domain(payload)


@strawberry.type
class Mutation:
    """Write operations."""

    @strawberry.mutation(name="addEmployee")
    async def add_employee(
        self,
        info: Info[GraphQLContext, None],
        first_name: str,
        last_name: str,
        email: str,
        gender: str,
        designation: str,
        salary: float,
        date_of_joining: str,
        department: str,
        employee_photo: str | None = None,
    ) -> EmployeeType | None:
        service = info.context.employee_service
        data = EmployeeCreate(
            first_name=first_name,
            last_name=last_name,
            email=email,
            gender=gender,
            designation=designation,
            salary=salary,
            date_of_joining=date_of_joining,
            department=department,
            employee_photo=employee_photo,
        )
        employee = await run_operation(service.create_employee(data))
        return EmployeeType.from_domain(employee)

    @strawberry.mutation(name="updateEmployee")
    async def update_employee(
        self,
        info: Info[GraphQLContext, None],
        id: strawberry.ID,
        first_name: str | None = None,
        last_name: str | None = None,
        designation: str | None = None,
        salary: float | None = None,
        department: str | None = None,
    ) -> EmployeeType | None:
        service = info.context.employee_service
        data = EmployeeUpdate(
            first_name=first_name,
            last_name=last_name,
            designation=designation,
            salary=salary,
            department=department,
        )
        employee = await run_operation(service.update_employee(str(id), data))
        return EmployeeType.from_domain(employee)

    @strawberry.mutation(name="deleteEmployee")
    async def delete_employee(self, info: Info[GraphQLContext, None], id: strawberry.ID) -> str | None:
        service = info.context.employee_service
        return await run_operation(service.delete_employee(str(id)))

    @strawberry.mutation
    async def signup(
        self,
        info: Info[GraphQLContext, None],
        username: str,
        email: str,
        password: str,
    ) -> UserType:
        service = info.context.auth_service
        user = await run_operation(service.signup(username, email, password))
        return UserType.from_domain(user)


def create_schema(debug: bool = False) -> strawberry.Schema:
    """Build the schema.

    Field names are kept exactly as declared (no camel casing). Outside
    debug mode, unexpected resolver exceptions are masked.
    """
    extensions = [] if debug else [MaskErrors(should_mask_error=should_mask_error)]
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
        config=StrawberryConfig(auto_camel_case=False),
        extensions=extensions,
    )


def create_graphql_router(debug: bool = False) -> GraphQLRouter:
    """Build the FastAPI router serving the schema."""
    return GraphQLRouter(
        create_schema(debug=debug),
        context_getter=get_context,
        graphql_ide="graphiql" if debug else None,
    )
