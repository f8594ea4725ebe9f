import streamlit as st
import matplotlib.pyplot as plt
from io import BytesIO

from yieldcalc import (
    ProcessParameters, EconomicsInputs, YieldModel, InvalidParameter,
    derive_stats, derive_economics, sweep_cost_curve,
)
from yieldcalc import config
from yieldcalc.economics import format_cost
from yieldcalc.logger import configure_logging, get_logger

logger = get_logger(__name__)

# ============================
# Sidebar Inputs
# ============================

def slider(label, bounds, value, container=None, **kwargs):
    """Sidebar slider driven by a (min, max, step) tuple from config."""
    low, high, step = bounds
    target = container if container is not None else st.sidebar
    return target.slider(label, min_value=low, max_value=high, value=value, step=step, **kwargs)

def read_process_parameters():
    """Collect process inputs and build an immutable parameter set."""
    st.sidebar.header("1. Process Parameters")
    diameter = slider("Wafer Diameter (mm)", config.WAFER_DIAMETER_SLIDER, config.DEFAULT_WAFER_DIAMETER_MM)
    die_area = slider("Die Area (mm²)", config.DIE_AREA_SLIDER, config.DEFAULT_DIE_AREA_MM2)
    d0 = slider("Defect Density D0 (/cm²)", config.DEFECT_DENSITY_SLIDER, config.DEFAULT_DEFECT_DENSITY)

    model = st.sidebar.radio(
        "Yield Model", list(YieldModel), format_func=lambda m: m.label, horizontal=True
    )
    alpha = slider(
        "Cluster Factor (α)", config.CLUSTER_FACTOR_SLIDER, config.DEFAULT_CLUSTER_FACTOR,
        disabled=model is not YieldModel.NEGATIVE_BINOMIAL,
    )
    st.sidebar.info(model.description)

    st.sidebar.markdown("---")
    st.sidebar.header("2. Advanced Parameters")
    edge = slider("Edge Exclusion (mm)", config.EDGE_EXCLUSION_SLIDER, config.DEFAULT_EDGE_EXCLUSION_MM)
    pattern_pct = slider(
        "Pattern Density (%)", config.PATTERN_DENSITY_PCT_SLIDER, round(config.DEFAULT_PATTERN_DENSITY * 100)
    )
    maturity_pct = slider(
        "Process Maturity (%)", config.PROCESS_MATURITY_PCT_SLIDER, round(config.DEFAULT_PROCESS_MATURITY * 100)
    )

    return ProcessParameters(
        wafer_diameter_mm=diameter,
        die_area_mm2=die_area,
        defect_density_per_cm2=d0,
        cluster_factor=alpha,
        model=model,
        edge_exclusion_mm=edge,
        pattern_density=pattern_pct / 100,
        process_maturity=maturity_pct / 100,
    )

def read_economics_inputs():
    st.sidebar.markdown("---")
    st.sidebar.header("3. Economics & Repair")
    wafer_cost = st.sidebar.number_input(
        "Wafer Cost ($)", value=config.DEFAULT_WAFER_COST, min_value=0.0, step=100.0
    )
    utilization = slider(
        "Fab Utilization (%)", config.FAB_UTILIZATION_PCT_SLIDER, round(config.DEFAULT_FAB_UTILIZATION_PCT)
    )
    repair_pct = slider("Repairable Area (%)", config.REPAIRABLE_AREA_PCT_SLIDER, 0)
    return EconomicsInputs(
        wafer_cost=wafer_cost,
        repairable_area_fraction=repair_pct / 100,
        fab_utilization_pct=utilization,
    )

# ============================
# Cost Curve Chart
# ============================

def plot_cost_curve(points):
    """Cost per good die (left axis) and yield (right axis) against D0."""
    d0 = [p.defect_density for p in points]
    fig, ax_cost = plt.subplots(figsize=(9, 4))
    ax_cost.plot(d0, [p.cost_per_good_die for p in points], color="#10b981", label="Cost Per Die ($)")
    ax_cost.set_xlabel("Defect Density (D0)")
    ax_cost.set_ylabel("Cost ($)", color="#10b981")
    ax_cost.grid(True, linestyle="--", alpha=0.3)

    ax_yield = ax_cost.twinx()
    ax_yield.plot(d0, [p.yield_pct for p in points], color="#3b82f6", label="Yield (%)")
    ax_yield.set_ylabel("Yield (%)", color="#3b82f6")

    lines = ax_cost.get_lines() + ax_yield.get_lines()
    ax_cost.legend(lines, [line.get_label() for line in lines], loc="upper center")
    ax_cost.set_title("Cost vs. Defect Density")
    return fig

# ============================
# Main App
# ============================

def main():
    configure_logging()
    st.set_page_config(page_title="Die Yield & Cost Calculator", layout="wide")
    st.title("Die Yield & Cost Calculator")
    st.markdown(
        """
        Estimate how many dies fit on a wafer, how many of them work, and what
        each working die costs. Adjust process and economics parameters in the
        sidebar; every figure below is re-derived from them.
        """
    )

    try:
        params = read_process_parameters()
        econ = read_economics_inputs()
        stats = derive_stats(params)
        economics = derive_economics(params, econ)
        curve = sweep_cost_curve(params, econ)
    except InvalidParameter as e:
        logger.warning(f"Rejected input: {e}")
        st.error(str(e))
        return

    st.subheader("Wafer Statistics")
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Gross Dies", f"{stats.total_dies}")
    c2.metric("Yield", f"{stats.yield_rate:.1%}")
    c3.metric("Good Dies", f"{stats.good_dies:.1f}")
    c4.metric("Area Efficiency", f"{stats.efficiency:.1%}")

    st.subheader("Economics")
    c1, c2, c3 = st.columns(3)
    c1.metric(
        "Effective Yield", f"{economics.effective_yield:.1%}",
        delta=f"{(economics.effective_yield - stats.yield_rate) * 100:.1f} pts from repair",
    )
    c2.metric("CPGD (Cost/Good Die)", format_cost(economics.cost_per_good_die))
    c3.metric("Revenue", format_cost(economics.revenue))
    st.caption(f"Target CPGD: < ${config.CPGD_TARGET:.2f}")

    st.subheader("Cost vs. Defect Density Analysis")
    fig = plot_cost_curve(curve)
    st.pyplot(fig)

    buf = BytesIO()
    fig.canvas.print_png(buf)
    buf.seek(0)
    st.download_button(
        "Download Chart as PNG",
        data=buf,
        file_name="cost_curve.png",
        mime="image/png"
    )
    plt.close(fig)

    with st.expander("About This App"):
        st.markdown(
            """
            **Models:**

            - **Gross dies:** usable-disk area over die area, minus an edge-row
              correction `pi * 2r / sqrt(2A)`.
            - **Yield:** Poisson, Murphy or Negative Binomial over the critical-area
              defect exposure `D0 * A * pattern density`, capped by process maturity.
            - **Repair:** redundancy shrinks the critical area the model sees.
            - **CPGD:** wafer cost over good dies times fab utilization. A wafer with
              no good dies shows N/A.

            Cost values on the chart are capped at $1,000 for readability.
            """
        )

if __name__ == "__main__":
    main()
