import streamlit as st
import pandas as pd
import altair as alt

from models import AnalysisResult


def bar_width(percentage: float) -> float:
    """
    Width of a category bar, in percent of the track.
    Percentages come straight from the model; only the drawn width is clamped.
    """
    return max(0.0, min(100.0, float(percentage)))


def _fmt_count(count) -> str:
    return str(int(count)) if float(count).is_integer() else str(count)


def category_rows(result: AnalysisResult) -> list[dict]:
    return [
        {
            'label':      cat.name,
            'count_text': f"{_fmt_count(cat.count)} files",
            'width':      bar_width(cat.percentage),
        }
        for cat in result.categories
    ]


def categories_frame(result: AnalysisResult) -> pd.DataFrame:
    return pd.DataFrame(
        [{'Category': c.name, 'Files': c.count, 'Percentage': c.percentage} for c in result.categories],
        columns=['Category', 'Files', 'Percentage'],
    )


def category_chart(result: AnalysisResult) -> alt.Chart:
    df = categories_frame(result)
    return (
        alt.Chart(df)
           .mark_bar()
           .encode(
               x=alt.X('Files:Q', title='Files'),
               y=alt.Y('Category:N', title=None, sort='-x'),
               color=alt.Color('Category:N', legend=None),
               tooltip=[
                   alt.Tooltip('Category:N'),
                   alt.Tooltip('Files:Q'),
                   alt.Tooltip('Percentage:Q', title='%'),
               ]
           )
           .properties(title='Files per Category', height=max(60, 30 * len(df)))
    )


def render_category_rows(result: AnalysisResult) -> None:
    for row in category_rows(result):
        left, right = st.columns([3, 1])
        left.markdown(f"**{row['label']}**")
        right.caption(row['count_text'])
        st.progress(row['width'] / 100)

    if result.categories:
        with st.expander("Chart view", expanded=False):
            st.altair_chart(category_chart(result), width="stretch")
