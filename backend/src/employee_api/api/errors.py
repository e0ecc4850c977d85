"""Translation of domain errors into GraphQL errors."""

from collections.abc import Awaitable
from typing import TypeVar

from graphql import GraphQLError

from employee_api.exceptions import EmployeeAPIError

T = TypeVar("T")


def to_graphql_error(error: EmployeeAPIError) -> GraphQLError:
    """Build a GraphQL error carrying the domain message and error code."""
    return GraphQLError(error.message, extensions={"code": error.code})


async def run_operation(operation: Awaitable[T]) -> T:
    """Await a service call, converting domain errors for the client.

    Args:
        operation: Pending service coroutine

    Returns:
        The operation result

    Raises:
        GraphQLError: If the operation raised an EmployeeAPIError
    """
    try:
        return await operation
    except EmployeeAPIError as e:
        raise to_graphql_error(e) from e


def should_mask_error(error: GraphQLError) -> bool:
    """Mask unexpected exceptions, keep translated domain errors.

    Query syntax and validation errors have no original error; translated
    domain errors wrap a GraphQLError. Anything else leaked from a resolver.
    """
    original = error.original_error
    return original is not None and not isinstance(original, GraphQLError)
