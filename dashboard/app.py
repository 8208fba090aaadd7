import streamlit as st
import httpx
import pandas as pd
import logging
import altair as alt

from marketplace_backend.config import app_config

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Configuration
BACKEND_URL = app_config.BACKEND_URL

WINDOW_LABELS = {
    "week": "Week",
    "month": "Month",
    "half-year": "6 months",
    "year": "Year",
}

# Category glyphs live in the presentation layer only
CATEGORY_GLYPHS = {
    "Smartphones": "📱",
    "Tablets": "📱",
    "Headphones": "🎧",
    "Smart Watches": "⌚",
    "Laptops": "💻",
    "Monitors": "🖥️",
}
DEFAULT_GLYPH = "📦"

# Page config
st.set_page_config(
    page_title="MarketAnalytic - Marketplace Dashboard",
    page_icon="📈",
    layout="wide"
)

st.markdown("""
<style>
.trend-up { color: #15803d; font-weight: 600; }
.trend-down { color: #b91c1c; font-weight: 600; }
.trend-flat { color: #475569; font-weight: 600; }
</style>
""", unsafe_allow_html=True)

# Initialize session state
if "platform_id" not in st.session_state:
    st.session_state.platform_id = None

if "product_id" not in st.session_state:
    st.session_state.product_id = None


def fetch_platforms():
    """Fetch platform list from API."""
    try:
        response = httpx.get(f"{BACKEND_URL}/api/v1/platforms", timeout=5.0)
        if response.status_code == 200:
            return response.json()
        return None
    except Exception as e:
        logger.error(f"Error fetching platforms: {e}")
        return None


def fetch_products(platform_id: str):
    """Fetch product list for a platform."""
    try:
        response = httpx.get(
            f"{BACKEND_URL}/api/v1/platforms/{platform_id}/products", timeout=5.0
        )
        if response.status_code == 200:
            return response.json()
        return None
    except Exception as e:
        logger.error(f"Error fetching products for {platform_id}: {e}")
        return None


def fetch_analytics(platform_id: str, product_id: str, window: str):
    """Fetch windowed history and aggregates. Returns (data, error_detail)."""
    try:
        params = {"window": window}
        if product_id:
            params["product_id"] = product_id
        response = httpx.get(
            f"{BACKEND_URL}/api/v1/platforms/{platform_id}/analytics",
            params=params,
            timeout=10.0
        )
        if response.status_code == 200:
            return response.json(), None
        return None, response.json().get("detail", f"HTTP {response.status_code}")
    except Exception as e:
        logger.error(f"Error fetching analytics for {product_id}: {e}")
        return None, str(e)


def render_trend_badge(trend: float) -> str:
    if trend > 0:
        return f'<span class="trend-up">▲ {abs(trend):g}%</span>'
    if trend < 0:
        return f'<span class="trend-down">▼ {abs(trend):g}%</span>'
    return f'<span class="trend-flat">{abs(trend):g}%</span>'


# Sidebar
st.sidebar.title("📈 MarketAnalytic")

platform_data = fetch_platforms()
if not platform_data or not platform_data.get("platforms"):
    st.error("Backend unreachable or catalog empty")
    st.stop()

platforms = {p["id"]: p["name"] for p in platform_data["platforms"]}
platform_id = st.sidebar.radio(
    "Platform",
    list(platforms.keys()),
    format_func=lambda pid: platforms[pid],
    horizontal=True,
)

# Reset the product selection when the platform changes
if st.session_state.platform_id != platform_id:
    st.session_state.platform_id = platform_id
    st.session_state.product_id = None

product_data = fetch_products(platform_id) or {"products": []}
products = product_data["products"]

st.sidebar.markdown("### Top products")
for product in products:
    glyph = CATEGORY_GLYPHS.get(product["category"], DEFAULT_GLYPH)
    col_name, col_price = st.sidebar.columns([3, 2])
    with col_name:
        if st.button(f"{glyph} {product['name']}", key=f"select-{product['id']}",
                     use_container_width=True):
            st.session_state.product_id = product["id"]
        st.caption(product["category"])
    with col_price:
        st.markdown(
            f"**{product['price']:,.0f} ₽**<br>{render_trend_badge(product['trend'])}",
            unsafe_allow_html=True,
        )

if st.session_state.product_id is None and products:
    st.session_state.product_id = products[0]["id"]


# Main panel
window = st.radio(
    "Time range",
    list(WINDOW_LABELS.keys()),
    index=1,
    format_func=lambda w: WINDOW_LABELS[w],
    horizontal=True,
)

data, error = fetch_analytics(platform_id, st.session_state.product_id, window)

if data is None:
    st.warning(f"No analytics available: {error}")
else:
    product = data["product"]
    st.title(product["name"])
    st.caption(f"Product analytics: {product['id'].upper()}")

    # Summary cards
    aggregates = data["aggregates"]
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Average price", f"{aggregates['average_price']:,} ₽")
    with col2:
        st.metric("Units sold", f"{aggregates['total_units_sold']:,}")
    with col3:
        st.metric("Competitors (peak)", aggregates["peak_active_sellers"])

    df = pd.DataFrame(data["records"])
    df["date"] = pd.to_datetime(df["date"])

    # Price line
    st.subheader("Price dynamics")
    price_chart = alt.Chart(df).mark_line(color="#2563EB", strokeWidth=3).encode(
        x=alt.X("date:T", title="Date"),
        y=alt.Y("price:Q", title="Price (₽)", scale=alt.Scale(zero=False)),
        tooltip=[alt.Tooltip("date:T"), alt.Tooltip("price:Q", format=",")],
    ).properties(height=300).interactive()
    st.altair_chart(price_chart, use_container_width=True)

    col_sales, col_sellers = st.columns(2)

    with col_sales:
        st.subheader("Sales volume")
        sales_chart = alt.Chart(df).mark_bar(color="#10B981").encode(
            x=alt.X("date:T", title=None),
            y=alt.Y("units_sold:Q", title="Units"),
            tooltip=[alt.Tooltip("date:T"), alt.Tooltip("units_sold:Q")],
        ).properties(height=260)
        st.altair_chart(sales_chart, use_container_width=True)

    with col_sellers:
        st.subheader("Competition")
        sellers_chart = alt.Chart(df).mark_area(
            color="#8B5CF6", opacity=0.3, line={"color": "#8B5CF6"}
        ).encode(
            x=alt.X("date:T", title=None),
            y=alt.Y("active_sellers:Q", title="Sellers"),
            tooltip=[alt.Tooltip("date:T"), alt.Tooltip("active_sellers:Q")],
        ).properties(height=260)
        st.altair_chart(sellers_chart, use_container_width=True)

    with st.expander("View Data Table"):
        st.dataframe(df[["date", "price", "units_sold", "active_sellers", "revenue"]])


# Footer
st.sidebar.markdown("---")
st.sidebar.markdown("**Status**")
try:
    response = httpx.get(f"{BACKEND_URL}/health", timeout=5.0)
    if response.status_code == 200:
        health = response.json()
        st.sidebar.success("✅ Backend Online")
        st.sidebar.caption(f"Cached series: {health.get('cached_series', 0)}")
    else:
        st.sidebar.error("❌ Backend Offline")
except Exception:
    st.sidebar.error("❌ Backend Unreachable")
