"""Tool definitions shared by the MCP transports."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from foundation_foods.api.serializers import food_to_dict, simplified_response_to_dict
from foundation_foods.domain.errors import FoodQueryError
from foundation_foods.domain.foods import SearchResponse
from foundation_foods.services.engine import DEFAULT_LIMIT, FoodQueryEngine, clamp_limit

SEARCH_TOOL = "search_foundation_foods_by_name"
SIMPLIFIED_SEARCH_TOOL = "search_foundation_foods_and_return_nutrients_simplified"

_logger = logging.getLogger(__name__)


class SearchFoodsArguments(BaseModel):
    """Arguments of the full-record search tool."""

    name: str = Field(
        min_length=1,
        description=(
            "Food items/name to search for. Required and must be a non-empty string."
        ),
    )
    limit: Any = Field(
        default=DEFAULT_LIMIT,
        description="Maximum number of results (default: 3, max: 10)",
        json_schema_extra={"type": "number", "minimum": 1, "maximum": 10},
    )


class SimplifiedSearchArguments(SearchFoodsArguments):
    """Arguments of the simplified nutrient search tool."""

    nutrients_to_include: list[str] | None = Field(
        default=None,
        description=(
            "Nutrient names to return. Omit for the default set; "
            "pass an empty list for every nutrient."
        ),
    )


class SearchFoodsOutput(BaseModel):
    """Structured result of the full-record search tool."""

    found: bool
    count: int
    products: list[dict[str, Any]]


class SimplifiedSearchOutput(BaseModel):
    """Structured result of the simplified nutrient search tool."""

    found: bool
    count: int
    foods: list[dict[str, Any]]


@dataclass(frozen=True)
class ToolResult:
    """Outcome of a tool call; errors are reported, not raised."""

    content: dict[str, object] | str
    is_error: bool = False


@dataclass(frozen=True)
class ToolDefinition:
    """A named tool with its argument model and handler."""

    name: str
    description: str
    arguments_model: type[SearchFoodsArguments]
    output_model: type[BaseModel]
    handler: Callable[[FoodQueryEngine, Any], dict[str, object]]

    @property
    def input_schema(self) -> dict[str, object]:
        return self.arguments_model.model_json_schema()

    @property
    def output_schema(self) -> dict[str, object]:
        return self.output_model.model_json_schema()


class UnknownToolError(LookupError):
    """Raised when a caller names a tool that does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


def _search(engine: FoodQueryEngine, arguments: SearchFoodsArguments) -> dict[str, object]:
    foods = engine.search_by_name(arguments.name, clamp_limit(arguments.limit))
    response = SearchResponse(found=bool(foods), count=len(foods), items=tuple(foods))
    return {
        "found": response.found,
        "count": response.count,
        "products": [food_to_dict(food) for food in response.items],
    }


def _search_simplified(
    engine: FoodQueryEngine, arguments: SimplifiedSearchArguments
) -> dict[str, object]:
    response = engine.search_by_name_simplified(
        arguments.name,
        clamp_limit(arguments.limit),
        arguments.nutrients_to_include,
    )
    return simplified_response_to_dict(response)


TOOLS: dict[str, ToolDefinition] = {
    SEARCH_TOOL: ToolDefinition(
        name=SEARCH_TOOL,
        description=(
            "Search USDA foundation foods by name. This tool is only meant to be "
            "used for generic product searches like 'milk', 'eggs', "
            "'Cheese, cheddar', 'Broccoli, raw', etc."
        ),
        arguments_model=SearchFoodsArguments,
        output_model=SearchFoodsOutput,
        handler=_search,
    ),
    SIMPLIFIED_SEARCH_TOOL: ToolDefinition(
        name=SIMPLIFIED_SEARCH_TOOL,
        description=(
            "Search USDA foundation foods by name and return simplified nutrient "
            "information. Returns only essential nutrient data (name, amount, "
            "unit) for each food match."
        ),
        arguments_model=SimplifiedSearchArguments,
        output_model=SimplifiedSearchOutput,
        handler=_search_simplified,
    ),
}


def call_tool(
    engine: FoodQueryEngine, name: str, arguments: dict[str, object] | None
) -> ToolResult:
    """Validate arguments, run the named tool and shape its result."""
    tool = TOOLS.get(name)
    if tool is None:
        raise UnknownToolError(name)
    _logger.debug("Tool call: name=%s arguments=%s", name, arguments)

    try:
        parsed = tool.arguments_model.model_validate(arguments or {})
    except ValidationError as exc:
        _logger.warning("Tool %s rejected arguments: %s", name, exc)
        return ToolResult(content=_describe_validation_error(exc), is_error=True)

    try:
        content = tool.handler(engine, parsed)
    except FoodQueryError as exc:
        _logger.error("Tool %s failed: %s", name, exc)
        return ToolResult(content=f"Search failed: {exc}", is_error=True)

    _logger.debug(
        "Tool %s returning: found=%s count=%s",
        name,
        content.get("found"),
        content.get("count"),
    )
    return ToolResult(content=content)


def _describe_validation_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error.get("loc", ())) or "arguments"
    if error.get("type") == "missing":
        return f"Missing required parameter '{field}'"
    return f"Invalid parameter '{field}': {error.get('msg')}"
