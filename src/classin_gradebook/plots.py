import pandas as pd
import plotly.express as px
import plotly.graph_objects as go


def mark_distribution_chart(dist_df: pd.DataFrame) -> go.Figure:
    if dist_df.empty:
        return go.Figure()
    fig = px.bar(dist_df, x="bin", y="count", title="Marks distribution", labels={"bin": "Percent of total", "count": "Records"})
    fig.update_layout(bargap=0.05)
    return fig


def assignment_average_bar(summary_df: pd.DataFrame) -> go.Figure:
    if summary_df.empty:
        return go.Figure()
    fig = px.bar(summary_df, x="Assignment Name", y="avg_percent", title="Average percent by assignment")
    fig.update_layout(xaxis_title="Assignment", yaxis_title="Avg percent", yaxis_range=[0, 100])
    return fig
