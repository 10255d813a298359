from __future__ import annotations

from typing import List, Optional, Sequence
import numpy as np
import plotly.graph_objects as go

LINE_COLOR = "rgba(173, 216, 230, 1)"
FILL_COLOR = "rgba(75, 192, 192, 0.2)"


def level_ticks(signal: Sequence[int]) -> List[int]:
    # Binary schemes sit on {0, 1}; AMI-family adds -1.
    return [-1, 0, 1] if any(v < 0 for v in signal) else [0, 1]


def step_chart(
    signal: Sequence[int],
    labels: Sequence[str],
    title: str,
    *,
    levels: Optional[Sequence[int]] = None,
    grid: bool = True,
) -> go.Figure:
    x = np.arange(len(signal))
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=x,
            y=list(signal),
            mode="lines",
            line_shape="hv",
            line=dict(color=LINE_COLOR, width=3),
            fillcolor=FILL_COLOR,
            name=f"{title} Encoding",
        )
    )
    fig.update_layout(
        title=title,
        xaxis_title="Bit",
        yaxis_title="Level",
        showlegend=True,
    )
    fig.update_xaxes(
        showgrid=grid,
        tickmode="array",
        tickvals=list(range(len(labels))),
        ticktext=list(labels),
    )
    ticks = sorted(levels) if levels else level_ticks(signal)
    fig.update_yaxes(
        showgrid=grid,
        tickmode="array",
        tickvals=ticks,
        range=[min(ticks) - 0.25, max(ticks) + 0.25],
    )
    return fig
