"""Prayer Times — Streamlit app for the prayer timetable of a given date."""

import datetime
import html

from dotenv import load_dotenv

load_dotenv()

import streamlit as st  # noqa: E402

from prayertimes.cities import CITIES  # noqa: E402
from prayertimes.compute import (  # noqa: E402
    InvalidTimeZone,
    calculate_for_city,
    calculate_for_coordinates,
)
from prayertimes.methods import METHODS  # noqa: E402
from prayertimes.renderers.plotly_day import render_day_timeline  # noqa: E402
from prayertimes.renderers.text import format_all  # noqa: E402
from prayertimes.settings import ConfigError, load_config  # noqa: E402

_CUSTOM = "Custom coordinates"
_ENV_METHOD = "From environment"

st.set_page_config(
    page_title="Prayer Times",
    page_icon="☪",
    layout="wide",
    initial_sidebar_state="collapsed",
)

# --- Dark theme CSS ---
st.markdown(
    """
    <style>
    /* Full background */
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #050a1a !important;
    }
    /* Hide header/toolbar */
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    /* Bottom overlay common styles */
    .overlay-box {
        background: rgba(0, 0, 0, 0.65);
        border-radius: 12px;
        padding: 1.2rem 1.6rem;
        color: #e8e8e8;
        margin-bottom: 0.5rem;
    }
    .time-row {
        color: #e8d5a3;
        font-size: 1.1rem;
        line-height: 1.9;
    }
    /* Button */
    [data-testid="stButton"] button {
        background-color: rgba(126, 200, 227, 0.2) !important;
        color: #7ec8e3 !important;
        border: 1px solid #7ec8e3 !important;
        border-radius: 6px !important;
        font-weight: 600;
    }
    /* Labels */
    label, [data-testid="stWidgetLabel"] p {
        color: #aaaaaa !important;
        font-size: 0.85rem !important;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# --- Session state initialization ---
if "times" not in st.session_state:
    st.session_state.times = None
if "place" not in st.session_state:
    st.session_state.place = ""
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None

# --- Input bar ---
city_names = [c.name for c in CITIES] + [_CUSTOM]
col1, col2, col3, col4 = st.columns([3, 2, 2, 1])
with col1:
    place = st.selectbox("Place", city_names)
with col2:
    date_val = st.date_input("Date", value=datetime.date.today())
with col3:
    method = st.selectbox("Method", [_ENV_METHOD, *METHODS])
with col4:
    st.markdown("<div style='height:1.9rem'></div>", unsafe_allow_html=True)
    submitted = st.button("Calculate", use_container_width=True)

lat_val = lng_val = 0.0
tz_val = ""
if place == _CUSTOM:
    c1, c2, c3 = st.columns(3)
    with c1:
        lat_val = st.number_input("Latitude", -90.0, 90.0, 35.6892, format="%.4f")
    with c2:
        lng_val = st.number_input("Longitude", -180.0, 180.0, 51.3890, format="%.4f")
    with c3:
        tz_val = st.text_input("Timezone", placeholder="auto, e.g. Asia/Tehran")

# --- Form submission handler ---
if submitted:
    st.session_state.error_msg = None
    st.session_state.times = None
    try:
        config = load_config() if method == _ENV_METHOD else METHODS[method]
        if place == _CUSTOM:
            times = calculate_for_coordinates(
                lat_val, lng_val, date_val, tz_val.strip() or None, config
            )
            st.session_state.place = f"{lat_val:.4f}, {lng_val:.4f}"
        else:
            times = calculate_for_city(place, date_val, config)
            st.session_state.place = place
        st.session_state.times = times
    except (InvalidTimeZone, ConfigError) as e:
        st.session_state.error_msg = html.escape(str(e))

# --- Error message ---
if st.session_state.error_msg:
    st.markdown(
        f"<div class='overlay-box' style='border:1px solid #ff6b6b; color:#ff9999;'>"
        f"{st.session_state.error_msg}</div>",
        unsafe_allow_html=True,
    )

# --- Results ---
if st.session_state.times is not None:
    times = st.session_state.times
    title = f"{st.session_state.place} — {times.dhuhr:%Y-%m-%d (%Z)}"
    st.plotly_chart(
        render_day_timeline(times, title=title),
        use_container_width=True,
        config={"displayModeBar": False},
    )
    rows = "".join(
        f"<div class='time-row'>{name}: {value}</div>"
        for name, value in format_all(times, "%H:%M:%S").items()
    )
    st.markdown(f"<div class='overlay-box'>{rows}</div>", unsafe_allow_html=True)
