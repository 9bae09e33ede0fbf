"""
World Bank API Models

Structural contracts for the resources returned by the World Bank v2 API and
for the ``[meta, records]`` pagination envelope every list endpoint uses.
Field names follow the wire format.
"""
from __future__ import annotations

from typing import Any, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr, field_validator, model_validator

# Upstream sends page counters as numbers or numeric strings; keep whichever arrived
NumberOrString = Union[StrictInt, StrictFloat, StrictStr]

T = TypeVar("T", bound=BaseModel)


class Reference(BaseModel):
    """An ``{id, value}`` pair the API embeds in other resources."""

    id: str = Field(..., description="Identifier")
    value: str = Field(..., description="Human-readable name")


class TopicRef(Reference):
    """Topic reference embedded in an indicator."""


class SourceRef(Reference):
    """Source database an indicator belongs to."""


class IndicatorRef(Reference):
    """Indicator reference embedded in a data record."""


class CountryRef(Reference):
    """Country, region or income group embedded in a data record."""


class Topic(BaseModel):
    """World Bank topic (subject-matter category)."""

    id: str = Field(..., description="World Bank Topic ID")
    value: str = Field(..., description="Human readable topic name")
    sourceNote: str = Field(..., description="Category description")


class Indicator(BaseModel):
    """Metadata object describing a possible or selected indicator."""

    id: str = Field(..., description="World Bank Indicator ID")
    name: str = Field(..., description="Human-readable name of the indicator")
    unit: str = Field(default="", description="Unit of measurement for the indicator")
    source: Optional[SourceRef] = Field(default=None, description="Source information for the indicator")
    sourceNote: str = Field(default="", description="Description of the indicator")
    sourceOrganization: str = Field(default="", description="Organization responsible for the indicator")
    topics: List[TopicRef] = Field(default_factory=list, description="Associated topics")


class DataRecord(BaseModel):
    """Data record for a specific indicator, country, and date."""

    indicator: IndicatorRef = Field(..., description="World Bank Indicator ID and meaning")
    country: CountryRef = Field(..., description="World Bank Country ID and name")
    countryiso3code: str = Field(
        ...,
        description="ISO 3166-1 alpha-3 codes, 'all', or region/income groups"
    )
    date: str = Field(..., description="Year/quarter of the observation")
    # Required but nullable: None marks a missing measurement
    value: Optional[Union[StrictInt, StrictFloat]] = Field(
        ...,
        description="Numeric value of the indicator for the given date and country"
    )
    unit: str = Field(..., description="Unit of measurement")
    obs_status: str = Field(..., description="Observation status")
    decimal: Union[StrictInt, StrictFloat] = Field(..., description="Number of decimal places")


class PaginationMeta(BaseModel):
    """Pagination and metadata information."""

    page: NumberOrString = Field(..., description="Current page number")
    pages: NumberOrString = Field(..., description="Total number of pages available")
    per_page: NumberOrString = Field(..., description="Number of records per page")
    total: NumberOrString = Field(..., description="Total number of records matching the query")
    sourceid: Optional[str] = Field(default=None, description="Source identifier")
    lastupdated: Optional[str] = Field(default=None, description="Timestamp of the last update")

    @field_validator("total")
    @classmethod
    def check_numeric_total(cls, v: Union[int, float, str]) -> Union[int, float, str]:
        """A string total must hold a number; the original representation is kept."""
        if isinstance(v, str):
            try:
                float(v)
            except ValueError:
                raise ValueError(f"total must be numeric, got {v!r}") from None
        return v

    @property
    def total_count(self) -> int:
        """``total`` as an integer, whichever representation arrived."""
        return int(float(self.total))


class PaginatedResponse(BaseModel, Generic[T]):
    """Paginated response containing metadata and a records array.

    On the wire this is a two-element JSON array ``[meta, records]``; it is
    decoded into named fields here so callers never index positionally.
    """

    meta: PaginationMeta = Field(..., description="Pagination metadata")
    records: List[T] = Field(..., description="Array of data records")

    @model_validator(mode="before")
    @classmethod
    def decode_envelope(cls, data: Any) -> Any:
        if isinstance(data, cls):
            return data
        if not isinstance(data, (list, tuple)):
            raise ValueError(
                f"Expected a [meta, records] array, got {type(data).__name__}"
            )
        if len(data) != 2:
            raise ValueError(
                f"Expected a [meta, records] pair, got an array of {len(data)} element(s)"
            )
        meta, records = data
        # An empty result set arrives as [meta, null]
        return {"meta": meta, "records": [] if records is None else records}


TopicsResponse = PaginatedResponse[Topic]
IndicatorsResponse = PaginatedResponse[Indicator]
DataResponse = PaginatedResponse[DataRecord]
