"""API routes exposing the ingredient engine."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field, model_validator

from grocerylist.config import get_settings
from grocerylist.logging_config import get_logger
from grocerylist.normalize import (
    Category,
    UnitSystem,
    categorize,
    convert_ingredients,
    normalize_name,
    parse_ingredient,
    scale_line,
)
from grocerylist.plan.grocery_list import aggregate_lines
from grocerylist.schemas import MergedEntryResponse, ParsedIngredientResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/ingredients", tags=["ingredients"])


# Request/Response schemas
class LinesRequest(BaseModel):
    """A batch of raw ingredient lines."""

    lines: list[str] = Field(default_factory=list)


class ParseResponse(BaseModel):
    ingredients: list[ParsedIngredientResponse]


class ScaleRequest(LinesRequest):
    """Scale by an explicit multiplier or by a servings ratio."""

    multiplier: float | None = Field(None, gt=0)
    recipe_servings: int | None = Field(None, ge=1)
    servings: int | None = Field(None, ge=1)

    @model_validator(mode="after")
    def check_scale(self) -> "ScaleRequest":
        has_servings = self.recipe_servings is not None and self.servings is not None
        if self.multiplier is None and not has_servings:
            raise ValueError("Provide either multiplier or both recipe_servings and servings")
        return self

    @property
    def effective_multiplier(self) -> float:
        if self.multiplier is not None:
            return self.multiplier
        return self.servings / self.recipe_servings


class ConvertRequest(LinesRequest):
    unit_system: UnitSystem | None = None


class LinesResponse(BaseModel):
    lines: list[str]


class NormalizeRequest(BaseModel):
    names: list[str] = Field(default_factory=list)


class NormalizedName(BaseModel):
    original: str
    normalized: str
    category: Category


class NormalizeResponse(BaseModel):
    names: list[NormalizedName]


class AggregateResponse(BaseModel):
    entries: list[MergedEntryResponse]
    total: int


def _check_batch_size(count: int) -> None:
    limit = get_settings().max_lines_per_request
    if count > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"At most {limit} lines per request, got {count}",
        )


@router.post("/parse", response_model=ParseResponse)
async def parse_lines(request: LinesRequest) -> ParseResponse:
    """Split each line into quantity, unit and name."""
    _check_batch_size(len(request.lines))
    return ParseResponse(
        ingredients=[
            ParsedIngredientResponse.model_validate(parse_ingredient(line))
            for line in request.lines
        ]
    )


@router.post("/scale", response_model=LinesResponse)
async def scale_lines(request: ScaleRequest) -> LinesResponse:
    """Scale lines to a new serving count."""
    _check_batch_size(len(request.lines))
    multiplier = request.effective_multiplier
    logger.info(f"Scaling {len(request.lines)} lines by {multiplier:.3f}")
    return LinesResponse(lines=[scale_line(line, multiplier) for line in request.lines])


@router.post("/convert", response_model=LinesResponse)
async def convert_lines(request: ConvertRequest) -> LinesResponse:
    """
    Convert lines to metric or imperial display units.

    Falls back to the configured default unit system.
    """
    _check_batch_size(len(request.lines))
    target = request.unit_system or UnitSystem(get_settings().default_unit_system)
    return LinesResponse(lines=convert_ingredients(request.lines, target))


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize_names(request: NormalizeRequest) -> NormalizeResponse:
    """Canonicalize ingredient names and assign a category."""
    _check_batch_size(len(request.names))
    results = []
    for name in request.names:
        normalized = normalize_name(name)
        results.append(
            NormalizedName(
                original=name,
                normalized=normalized,
                category=categorize(normalized),
            )
        )
    return NormalizeResponse(names=results)


@router.post("/aggregate", response_model=AggregateResponse)
async def aggregate(request: LinesRequest) -> AggregateResponse:
    """Merge lines into grocery-list entries without touching the basket."""
    _check_batch_size(len(request.lines))
    entries = aggregate_lines(request.lines)
    return AggregateResponse(
        entries=[
            MergedEntryResponse(
                name=entry.key.name,
                unit=entry.key.unit,
                total_quantity=entry.total_quantity,
                display_name=entry.display_name,
                category=entry.category,
                quantity=entry.quantity,
            )
            for entry in entries
        ],
        total=len(entries),
    )
