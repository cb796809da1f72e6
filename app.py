import streamlit as st
import pandas as pd
import io
from core.errors import AmpacityError
from core.models import AirSpacing, ConductorType, InstallationMethod, QueryParameters
from standards.ampacity_logic import AmpacityLogic

# --- Page Config ---
st.set_page_config(
    page_title="Flexible Cable Ampacity",
    page_icon="⚡",
    layout="centered",
)

# --- Custom CSS ---
st.markdown("""
<style>
    .main-header { font-family: 'Inter', sans-serif; color: #334155; font-weight: 700; }
    .amp-result { color: #FF0000; font-size: 3rem; font-weight: 700; text-align: center; }
    .stDataFrame { border-radius: 10px; overflow: hidden; }
</style>
""", unsafe_allow_html=True)

# --- Session State Init ---
if "wire_type" not in st.session_state:
    st.session_state.wire_type = ConductorType.HYPALON
if "wire_size" not in st.session_state:
    st.session_state.wire_size = "5.5"

def on_type_change():
    # Switching type keeps the size if the new table lists it, else its first size
    st.session_state.wire_size = AmpacityLogic.default_size(
        st.session_state.wire_type, st.session_state.wire_size
    )

# --- Helper: Reference table ---
def build_reference_df(params: QueryParameters) -> pd.DataFrame:
    rows = []
    for size, res in AmpacityLogic.ampacity_table(params):
        rows.append({
            "Size (mm²)": size,
            "In (A)": res.base_ampacity,
            "Temp. factor": res.temperature_factor,
            "Grouping factor": res.secondary_factor,
            "I (A)": res.final_ampacity,
        })
    return pd.DataFrame(rows)

# --- Helper: Export Excel ---
def to_excel(df: pd.DataFrame, params: QueryParameters) -> bytes:
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        df.to_excel(writer, index=False, sheet_name='Ampacity')
        c_df = pd.DataFrame([
            {"Parameter": "Conductor type", "Value": params.conductor_type.label},
            {"Parameter": "Installation", "Value": params.installation_method.label},
            {"Parameter": "Ambient (°C)", "Value": params.ambient_temp_c},
            {"Parameter": "Bundle count", "Value": params.bundle_key},
            {"Parameter": "Spacing", "Value": params.air_spacing.value},
            {"Parameter": "Cable count", "Value": params.air_count},
        ])
        c_df.to_excel(writer, index=False, sheet_name='Conditions')
    return output.getvalue()

# --- Header ---
wire_type = st.session_state.wire_type
st.markdown(f"<h1 class='main-header'>{wire_type.label}</h1>", unsafe_allow_html=True)
st.caption(f"Safe current lookup · max conductor temperature {wire_type.max_conductor_temp_c}°C")

# --- Inputs ---
st.radio(
    "Cable type",
    AmpacityLogic.conductor_types(),
    format_func=lambda t: t.label,
    key="wire_type",
    on_change=on_type_change,
    horizontal=True,
)

sizes = AmpacityLogic.size_labels(st.session_state.wire_type)
st.selectbox("Size", sizes, key="wire_size", format_func=lambda s: f"{s} mm²")

method = st.radio(
    "Installation",
    AmpacityLogic.installation_methods(),
    format_func=lambda m: m.label,
    horizontal=True,
)

temp = st.slider("Ambient temperature (°C)", min_value=20, max_value=50, value=25, step=5)

bundle_key = "1"
spacing = AirSpacing.S_D
count = 1
if method is InstallationMethod.CONDUIT:
    options = AmpacityLogic.bundle_options()
    bundle_key = st.selectbox(
        "Conductors in the same conduit",
        [o.key for o in options],
        format_func=lambda k: next(f"{o.label} (factor: {o.factor})" for o in options if o.key == k),
    )
else:
    spacing = st.radio(
        "Spacing between cables",
        AmpacityLogic.air_spacings(),
        format_func=lambda s: s.value,
        horizontal=True,
    )
    f4_options = dict(AmpacityLogic.spacing_factor_options(spacing))
    count = st.selectbox(
        "Number of cables (f4)",
        AmpacityLogic.air_counts(),
        format_func=lambda n: f"{n} (f4: {f4_options[n]})",
    )

params = QueryParameters(
    conductor_type=st.session_state.wire_type,
    size=st.session_state.wire_size,
    installation_method=method,
    ambient_temp_c=temp,
    bundle_key=bundle_key,
    air_spacing=spacing,
    air_count=count,
)

# --- Result ---
st.markdown("---")
try:
    result = AmpacityLogic.compute_ampacity(params)
except AmpacityError as e:
    st.error(f"Error: {e}")
    st.stop()

st.subheader("Safe current")
st.markdown(f"<p class='amp-result'>{result.final_ampacity} A</p>", unsafe_allow_html=True)

c1, c2, c3 = st.columns(3)
c1.metric("Base current In", f"{result.base_ampacity} A")
if method is InstallationMethod.CONDUIT:
    c2.metric(f"Temperature factor f1 ({result.resolved_temp_c}°C)", result.temperature_factor)
    c3.metric("Count factor f2", result.secondary_factor)
else:
    c2.metric(f"Temperature factor f3 ({result.resolved_temp_c}°C)", result.temperature_factor)
    c3.metric(f"Grouping factor f4 ({spacing.value}, {count})", result.secondary_factor)
st.caption(result.formula)

# --- Reference Table ---
with st.expander("All sizes under these conditions"):
    ref_df = build_reference_df(params)
    st.dataframe(ref_df, use_container_width=True, hide_index=True)
    st.download_button(
        "📥 Download Excel",
        data=to_excel(ref_df, params),
        file_name=f"ampacity_{params.conductor_type.value}_{method.value}.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )

st.info(
    "Results are for reference only. Safe current varies with ambient temperature, "
    "installation method and number of cables; check the latest manufacturer tables and regulations."
)
