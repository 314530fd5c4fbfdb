"""Plotly day-timeline renderer.

Places the eight times of one day on a single horizontal axis, with the
daylight span (sunrise → sunset) shaded.
"""

import plotly.graph_objects as go

from prayertimes.models import PrayerTimeSet

_BG = "#050a1a"
_MARKER_COLOR = "#e8d5a3"
_DAY_COLOR = "rgba(126, 200, 227, 0.15)"
_TEXT_COLOR = "#d0d8e8"


def render_day_timeline(times: PrayerTimeSet, title: str = "") -> go.Figure:
    """Render a PrayerTimeSet as a Plotly timeline.

    Labels alternate above and below the axis so neighbouring times
    (sunset/maghrib) stay readable.

    Args:
        times: Computed prayer times.
        title: Figure title.

    Returns:
        Plotly Figure object.
    """
    names = [name.capitalize() for name, _ in times.items()]
    # Naive local wall times keep the x axis in the location's zone
    x_vals = [t.replace(tzinfo=None) for _, t in times.items()]
    y_vals = [1 if i % 2 == 0 else -1 for i in range(len(x_vals))]

    marker_trace = go.Scatter(
        x=x_vals,
        y=[0] * len(x_vals),
        mode="markers",
        marker=dict(size=10, color=_MARKER_COLOR, line=dict(width=0)),
        hovertext=[f"{n} {t:%H:%M:%S}" for n, t in zip(names, x_vals)],
        hoverinfo="text",
        name="times",
    )

    label_trace = go.Scatter(
        x=x_vals,
        y=y_vals,
        mode="text",
        text=[f"{n}<br>{t:%H:%M}" for n, t in zip(names, x_vals)],
        textfont=dict(color=_TEXT_COLOR, size=12),
        hoverinfo="skip",
        name="labels",
    )

    fig = go.Figure(data=[marker_trace, label_trace])
    fig.update_layout(
        title=dict(text=title, font=dict(color=_TEXT_COLOR)),
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=20, r=20, t=40 if title else 10, b=30),
        height=260,
        xaxis=dict(
            type="date",
            tickformat="%H:%M",
            color=_TEXT_COLOR,
            showgrid=False,
        ),
        yaxis=dict(visible=False, range=[-2.0, 2.0], fixedrange=True),
        shapes=[
            dict(
                type="rect",
                xref="x",
                yref="paper",
                x0=times.sunrise.replace(tzinfo=None),
                x1=times.sunset.replace(tzinfo=None),
                y0=0,
                y1=1,
                fillcolor=_DAY_COLOR,
                line=dict(width=0),
                layer="below",
            ),
            dict(
                type="line",
                xref="paper",
                yref="y",
                x0=0,
                x1=1,
                y0=0,
                y1=0,
                line=dict(color="#334466", width=1),
            ),
        ],
    )
    return fig
