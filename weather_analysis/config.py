"""Configuration constants for the weather analysis engine."""

# Daytime span used for intra-day windows: [06:00, 22:00)
WINDOW_START_HOUR = 6
WINDOW_END_HOUR = 22

# Day parts for "best time to sail" (start hour inclusive, end hour exclusive)
DAY_PERIODS = {
    "morning": (6, 12),
    "afternoon": (12, 18),
    "evening": (18, 22),
}

# Beaufort upper bounds in km/h; force 0 is strictly below the first bound
BEAUFORT_LIMITS = [1, 5, 11, 19, 28, 38, 49, 61, 74, 88, 102, 117]
BEAUFORT_DESCRIPTIONS = [
    "Calm",
    "Light air",
    "Light breeze",
    "Gentle breeze",
    "Moderate breeze",
    "Fresh breeze",
    "Strong breeze",
    "Near gale",
    "Gale",
    "Strong gale",
    "Storm",
    "Violent storm",
    "Hurricane force",
]

# Gust weight in the effective wind: max(sustained, 0.7 * gust)
GUST_WEIGHT = 0.7

# Gust estimate when a day has no gust samples
GUST_FACTOR = 1.3

# WMO weather code families
CLEAR_CODES = frozenset({0, 1, 2})
SHOWER_STORM_CODES = frozenset({80, 81, 82, 85, 86, 95, 96, 99})
RAIN_SNOW_CODES = frozenset({61, 63, 65, 71, 73, 75})

# Classifier thresholds (km/h, °C)
DANGEROUS_GUST = 80
DANGEROUS_BEAUFORT = 9
DIFFICULT_BEAUFORT = 6
DIFFICULT_GUST = 70
MODERATE_BEAUFORT = 4
MODERATE_EFFECTIVE_WIND = 20
MODERATE_GUST = 50
EXCELLENT_WIND_RANGE = (6, 14)
EXCELLENT_MIN_TEMPERATURE = 20
GOOD_WIND_RANGE = (10, 20)
GOOD_WIND_MIN_TEMPERATURE = 14
GOOD_CLEAR_MIN_TEMPERATURE = 18
CALM_EFFECTIVE_WIND = 6
CALM_BEAUFORT = 1

# Commentary thresholds
GUSTY_DAY_GUST = 50
SHIFTING_DIRECTION_STD = 60
VARIABLE_DIRECTION_STD = 90
LIGHT_MEAN_WIND = 6
BREEZE_MEAN_WIND = 20
POOR_VISIBILITY_M = 5000
HOT_TEMPERATURE = 30
COOL_TEMPERATURE = 15
HUMID_PERCENT = 80
WIDE_THERMAL_AMPLITUDE = 12
SUNNY_DAY_HOURS = 8
MIXED_SKIES_HOURS = 4

# Civil twilight, same as the kite daylight filter
DAYLIGHT_DEPRESSION_ANGLE = 6.0
DAYLIGHT_CACHE_SIZE = 32  # dates

# Fallback generator ranges
FALLBACK_BASE_TEMPERATURE = 25.0
FALLBACK_BASE_PRESSURE = 1015.0
FALLBACK_WIND_RANGE = (8.0, 20.0)

# Provider hourly variables (Open-Meteo names)
HOURLY_VARIABLES = [
    "temperature_2m",
    "relative_humidity_2m",
    "precipitation",
    "rain",
    "showers",
    "weather_code",
    "pressure_msl",
    "visibility",
    "wind_speed_10m",
    "wind_direction_10m",
    "wind_gusts_10m",
]
