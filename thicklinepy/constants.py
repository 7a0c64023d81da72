# Point equality / normalization safety
EPS_COINCIDENT = 1e-12
# Minimum main-body span after leads and features are subtracted
EPS_SKETCH_LEN = 1e-9

FEATURE_NONE = "None"
FEATURE_ARROW = "Arrow"
FEATURE_T = "T"
FEATURE_TYPES = [FEATURE_NONE, FEATURE_ARROW, FEATURE_T]

DEFAULT_WIDTH = 0.2
DEFAULT_LEAD = 0.0
DEFAULT_FEATURE_TYPE = FEATURE_NONE
DEFAULT_FEATURE_WIDTH = 0.5
DEFAULT_FEATURE_LENGTH = 0.5

# Keys of the persisted settings file, in write order
SETTINGS_KEYS = [
    "width_cm",
    "featAType",
    "leadA_cm",
    "featAL_cm",
    "featAW_cm",
    "featBType",
    "leadB_cm",
    "featBL_cm",
    "featBW_cm",
]
SETTINGS_ENV_VAR = "THICKLINE_SETTINGS"
SETTINGS_FILE_NAME = "settings.ini"

ERROR_BOX_COLOR = "#d32f2f"
