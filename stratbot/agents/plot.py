"""
Chart rendering tool.

Renders a ``PlotToolInput`` chart specification with matplotlib and returns
it as a base64 data URL, so the agent can hand the image straight to the
chat front-end.
"""
from __future__ import annotations

import base64
import io
import logging
import math
import re
from typing import Any, List, Optional, Tuple

from langchain_core.tools import StructuredTool
from matplotlib import colors as mcolors
from matplotlib.figure import Figure

from ..models_plot import CanvasOptions, Dataset, PlotToolInput, XYPoint

logger = logging.getLogger(__name__)

DPI = 100

_RGB_PATTERN = re.compile(r"rgba?\(\s*([^)]*)\)", re.IGNORECASE)

_IMAGE_FORMATS = {
    "image/png": "png",
    "image/jpeg": "jpeg",
}


def to_mpl_color(color: Optional[str]) -> Optional[Any]:
    """Translate a CSS color string into something matplotlib accepts.

    Handles names, hex and ``rgb()``/``rgba()`` notation. Unknown colors
    return None so matplotlib falls back to its color cycle.
    """
    if not color:
        return None
    match = _RGB_PATTERN.fullmatch(color.strip())
    if match:
        parts = [p.strip() for p in match.group(1).split(",")]
        try:
            channels = [float(p) / 255.0 for p in parts[:3]]
            alpha = float(parts[3]) if len(parts) > 3 else 1.0
        except ValueError:
            return None
        if len(channels) != 3:
            return None
        return (*[min(max(c, 0.0), 1.0) for c in channels], min(max(alpha, 0.0), 1.0))
    if mcolors.is_color_like(color):
        return color
    return None


def _first_color(value: str | List[str]) -> Optional[Any]:
    if isinstance(value, list):
        return to_mpl_color(value[0]) if value else None
    return to_mpl_color(value)


def _color_list(value: str | List[str], size: int) -> Optional[List[Any]]:
    """Per-point colors for pie-like charts (None lets matplotlib choose)."""
    if not isinstance(value, list):
        return None
    converted = [to_mpl_color(c) for c in value]
    if len(converted) < size or any(c is None for c in converted[:size]):
        return None
    return converted[:size]


def point_xy(dataset: Dataset) -> Tuple[List[Optional[float]], List[float]]:
    """X (None when the point has no x) and Y values; missing points become NaN."""
    xs: List[Optional[float]] = []
    ys: List[float] = []
    for point in dataset.data:
        if point is None:
            xs.append(None)
            ys.append(math.nan)
        elif isinstance(point, XYPoint):
            xs.append(point.x)
            ys.append(point.y)
        elif isinstance(point, list):
            xs.append(point[0])
            ys.append(point[1])
        else:
            xs.append(None)
            ys.append(float(point))
    return xs, ys


def _positions(xs: List[Optional[float]]) -> List[float]:
    """Use explicit x values when every point has one, else the label index."""
    if xs and all(x is not None for x in xs):
        return [float(x) for x in xs]
    return [float(i) for i in range(len(xs))]


def _draw_cartesian(ax, spec: PlotToolInput) -> None:
    labels = spec.data.labels
    datasets = spec.data.datasets
    chart_type = spec.type
    bar_width = 0.8 / len(datasets)

    for index, dataset in enumerate(datasets):
        xs, ys = point_xy(dataset)
        positions = _positions(xs)
        face = _first_color(dataset.backgroundColor)
        edge = _first_color(dataset.borderColor)

        if chart_type == "bar":
            offset = (index - (len(datasets) - 1) / 2) * bar_width
            ax.bar(
                [p + offset for p in positions],
                [0.0 if math.isnan(y) else y for y in ys],
                width=bar_width,
                label=dataset.label,
                color=face,
                edgecolor=edge,
            )
        elif chart_type in ("scatter", "bubble"):
            size = 120 if chart_type == "bubble" else 30
            ax.scatter(positions, ys, s=size, label=dataset.label, color=face, edgecolors=edge, alpha=0.8)
        else:
            ax.plot(positions, ys, marker="o", label=dataset.label, color=edge or face)

    if labels:
        ax.set_xticks(range(len(labels)))
        ax.set_xticklabels(labels, rotation=45 if len(labels) > 8 else 0, ha="right" if len(labels) > 8 else "center")


def _draw_pie(ax, spec: PlotToolInput) -> None:
    labels = spec.data.labels
    datasets = spec.data.datasets
    ring = 0.3 if spec.type == "doughnut" or len(datasets) > 1 else None

    for index, dataset in enumerate(datasets):
        _, ys = point_xy(dataset)
        values = [0.0 if math.isnan(y) else max(y, 0.0) for y in ys]
        if not any(values):
            continue
        radius = 1.0 - index * (ring or 0.0)
        wedgeprops = {"width": ring} if ring else {}
        edge = _first_color(dataset.borderColor)
        if edge is not None:
            wedgeprops["edgecolor"] = edge
        ax.pie(
            values,
            labels=labels[: len(values)] if index == 0 and labels else None,
            colors=_color_list(dataset.backgroundColor, len(values)),
            radius=radius,
            wedgeprops=wedgeprops,
        )
    ax.set_aspect("equal")


def _draw_polar(ax, spec: PlotToolInput) -> None:
    labels = spec.data.labels
    datasets = spec.data.datasets
    count = max(len(ds.data) for ds in datasets)
    angles = [2 * math.pi * i / count for i in range(count)]

    for dataset in datasets:
        _, ys = point_xy(dataset)
        values = [0.0 if math.isnan(y) else y for y in ys]
        face = _first_color(dataset.backgroundColor)
        edge = _first_color(dataset.borderColor)
        if spec.type == "polarArea":
            ax.bar(
                angles[: len(values)],
                values,
                width=2 * math.pi / count,
                color=_color_list(dataset.backgroundColor, len(values)) or face,
                edgecolor=edge,
                alpha=0.7,
                label=dataset.label,
            )
        else:
            closed_angles = angles[: len(values)] + angles[:1]
            closed_values = values + values[:1]
            ax.plot(closed_angles, closed_values, color=edge or face, label=dataset.label)
            ax.fill(closed_angles, closed_values, color=face or edge, alpha=0.25)

    if labels:
        ax.set_xticks(angles[: len(labels)])
        ax.set_xticklabels(labels[:count])


def render_chart(spec: PlotToolInput) -> str:
    """
    Render a chart specification to an image.

    Args:
        spec: Validated chart specification

    Returns:
        ``data:<mime>;base64,...`` URL of the rendered image
    """
    canvas = spec.nodeCanvas
    fig = Figure(figsize=(canvas.width / DPI, canvas.height / DPI), dpi=DPI)
    polar = spec.type in ("polarArea", "radar")
    ax = fig.add_subplot(projection="polar" if polar else None)

    if spec.type in ("pie", "doughnut"):
        _draw_pie(ax, spec)
    elif polar:
        _draw_polar(ax, spec)
    else:
        _draw_cartesian(ax, spec)

    title = spec.options.title
    if title.display and title.text:
        ax.set_title(title.text)

    legend = spec.options.legend
    if legend.display and spec.type not in ("pie", "doughnut"):
        if legend.position == "top":
            ax.legend(loc="lower center", bbox_to_anchor=(0.5, 1.05), ncol=len(spec.data.datasets), frameon=False)
        else:
            ax.legend(loc="upper center", bbox_to_anchor=(0.5, -0.12), ncol=len(spec.data.datasets), frameon=False)

    buffer = io.BytesIO()
    fig.savefig(buffer, format=_IMAGE_FORMATS[canvas.mimeType], dpi=DPI)
    encoded = base64.b64encode(buffer.getvalue()).decode("ascii")

    logger.info(f"Rendered {spec.type} chart ({canvas.width}x{canvas.height}, {canvas.mimeType})")
    return f"data:{canvas.mimeType};base64,{encoded}"


def plot(
    type: str = "line",
    data: Any = None,
    options: Any = None,
    nodeCanvas: Any = None,
) -> Tuple[str, str]:
    """Validate the tool arguments and render the chart."""
    spec = PlotToolInput.model_validate(
        {
            "type": type,
            "data": data,
            "options": options,
            "nodeCanvas": nodeCanvas if nodeCanvas is not None else CanvasOptions(),
        }
    )
    return "Generated chart", render_chart(spec)


plot_tool = StructuredTool.from_function(
    func=plot,
    name="plot_tool",
    description=(
        "A tool to create plots based on provided data and specifications. "
        "Use this tool when you need to visualize data in 2D or 3D formats "
        "because user requested a plot, graph or statistical representation."
    ),
    args_schema=PlotToolInput,
    response_format="content_and_artifact",
    return_direct=True,
)
