"""
Configuration Module.

Default process and economics parameters, presentation limits and the slider
ranges used by the Streamlit page. Defaults mirror a mature 300 mm line.
"""

# --- Default Process Parameters ---
DEFAULT_WAFER_DIAMETER_MM = 300.0
DEFAULT_DIE_AREA_MM2 = 100.0
DEFAULT_DEFECT_DENSITY = 0.5      # defects/cm²
DEFAULT_CLUSTER_FACTOR = 2.0      # alpha, Negative-Binomial only
DEFAULT_EDGE_EXCLUSION_MM = 3.0
DEFAULT_PATTERN_DENSITY = 0.7     # critical area ratio
DEFAULT_PROCESS_MATURITY = 0.95   # systematic yield cap
DEFAULT_FAB_UTILIZATION = 0.95

# --- Physical Limits ---
MIN_WAFER_DIAMETER_MM = 200.0
MAX_WAFER_DIAMETER_MM = 450.0

# --- Default Economics Inputs ---
DEFAULT_WAFER_COST = 5000.0
DEFAULT_REPAIRABLE_AREA_FRACTION = 0.0
MAX_REPAIRABLE_AREA_FRACTION = 0.5
DEFAULT_SCRIBE_WIDTH_MM = 0.1
DEFAULT_FAB_UTILIZATION_PCT = 95.0
MIN_FAB_UTILIZATION_PCT = 50.0
MAX_FAB_UTILIZATION_PCT = 100.0
DEFAULT_MARKUP = 1.5

# --- Cost Curve ---
# Chart ceiling for cost per good die; applied to returned points only.
DISPLAY_COST_CEILING = 1000.0
DEFAULT_SWEEP_LOW = 0.1
DEFAULT_SWEEP_HIGH = 2.0
DEFAULT_SWEEP_STEP = 0.2
SWEEP_TOLERANCE = 1e-9

# --- Slider Ranges (min, max, step) ---
WAFER_DIAMETER_SLIDER = (250.0, 450.0, 50.0)
DIE_AREA_SLIDER = (20.0, 200.0, 1.0)
DEFECT_DENSITY_SLIDER = (0.01, 1.0, 0.01)
CLUSTER_FACTOR_SLIDER = (0.5, 5.0, 0.1)
EDGE_EXCLUSION_SLIDER = (0.0, 10.0, 0.5)
PATTERN_DENSITY_PCT_SLIDER = (30, 100, 5)
PROCESS_MATURITY_PCT_SLIDER = (80, 100, 1)
FAB_UTILIZATION_PCT_SLIDER = (50, 100, 1)
REPAIRABLE_AREA_PCT_SLIDER = (0, 50, 1)

CPGD_TARGET = 15.0
