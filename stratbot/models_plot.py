"""
Plot Tool Models

Minimal chart specification meant for language models: a chart type, labels,
datasets with basic styling, title/legend options and the canvas to render on.
"""
from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field


ChartType = Literal[
    "bar",
    "line",
    "scatter",
    "bubble",
    "pie",
    "doughnut",
    "polarArea",
    "radar",
]

MimeType = Literal["image/png", "image/jpeg"]

Color = str  # CSS color, hex, rgb, etc.


class XYPoint(BaseModel):
    """XY point object (for scatter / xy plots)."""
    x: float = Field(..., description="x")
    y: float = Field(..., description="y")


# number | {x, y} | [x, y] | null (missing/no-data marker)
XYTuple = Annotated[List[float], Field(min_length=2, max_length=2)]

DataPoint = Union[float, XYPoint, XYTuple, None]


class Dataset(BaseModel):
    """A single dataset (label, data, basic styling)."""
    label: str = Field(..., description="Dataset label")
    data: List[DataPoint] = Field(..., min_length=1, description="Array of data points")
    backgroundColor: Union[Color, List[Color]] = Field(
        ...,
        description="Background color or array of colors"
    )
    borderColor: Union[Color, List[Color]] = Field(
        ...,
        description="Border color or array of border colors"
    )


class ChartData(BaseModel):
    """Data object (labels + datasets)."""
    labels: List[str] = Field(default_factory=list, description="Optional x-axis labels")
    datasets: List[Dataset] = Field(..., min_length=1, description="One or more datasets")


class TitleOption(BaseModel):
    """Chart title options."""
    display: bool = Field(default=True, description="Show the title?")
    text: str = Field(..., description="Title text")


class LegendOption(BaseModel):
    """Legend options."""
    display: bool = Field(default=True, description="Show the legend?")
    position: Literal["top", "bottom"] = Field(default="top", description="Legend position")


class ChartOptions(BaseModel):
    """Top-level options (small subset)."""
    responsive: bool = Field(default=False, description="Make chart responsive")
    title: TitleOption = Field(..., description="Title plugin options")
    legend: LegendOption = Field(..., description="Legend plugin options")


class CanvasOptions(BaseModel):
    """Canvas options where the plot will be rendered."""
    width: int = Field(default=800, ge=100, le=4000, description="Canvas width")
    height: int = Field(default=600, ge=100, le=4000, description="Canvas height")
    mimeType: MimeType = Field(default="image/png", description="Canvas image MIME type")


class PlotToolInput(BaseModel):
    """
    Minimal plot input schema meant for LLMs and simple tools.

    Example:
        {
            "type": "line",
            "data": {
                "labels": ["2020", "2021"],
                "datasets": [{"label": "GDP", "data": [1.0, 2.0],
                              "backgroundColor": "#4e79a7", "borderColor": "#4e79a7"}]
            },
            "options": {"title": {"text": "GDP"}, "legend": {}}
        }
    """
    type: ChartType = Field(default="line", description="Chart type to render. Pick one of the most common types.")
    data: ChartData = Field(..., description="Data object (labels + datasets)")
    options: ChartOptions = Field(..., description="Chart options")
    nodeCanvas: CanvasOptions = Field(
        default_factory=CanvasOptions,
        description="Canvas options"
    )
