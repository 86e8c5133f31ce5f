"""Project-wide constants."""

EVENT_TYPES = ["Cyclone", "Flood", "Drought", "Heatwave", "Heavy Rainfall", "Storm Surge"]

# Default scoring tables; overridable through the scoring config section
DEFAULT_WEIGHTS = {
    "temperature": 0.20,
    "humidity": 0.15,
    "wind_speed": 0.25,
    "precipitation": 0.20,
    "storm_activity": 0.20,
}

# Keyed by the city part of "City, State"
DEFAULT_REGION_MULTIPLIERS = {
    "Mumbai": 2.5,
    "Chennai": 2.0,
    "Kolkata": 1.8,
    "Bhubaneswar": 1.5,
    "Visakhapatnam": 1.6,
    "Kochi": 1.4,
}

DEFAULT_EVENT_MULTIPLIERS = {
    "Cyclone": 2.0,
    "Flood": 1.5,
    "Drought": 1.2,
    "Heatwave": 1.0,
    "Heavy Rainfall": 1.3,
    "Storm Surge": 1.8,
}

REGION_COORDINATES = {
    "Mumbai, Maharashtra": (19.076, 72.8777),
    "Chennai, Tamil Nadu": (13.0827, 80.2707),
    "Kolkata, West Bengal": (22.5726, 88.3639),
    "Bhubaneswar, Odisha": (20.2961, 85.8245),
    "Visakhapatnam, Andhra Pradesh": (17.6868, 83.2185),
    "Kochi, Kerala": (9.9312, 76.2673),
}

# Geographic centre of India, used when a region has no known coordinates
INDIA_CENTER = (20.5937, 78.9629)

RISK_FACTOR_COLORS = {
    "Wind Speed": "#FF6A00",
    "Storm Activity": "#D89F7B",
    "Precipitation": "#BFA2DB",
    "Temperature": "#A3C9A8",
    "Humidity": "#7FB3D5",
}

ALERT_COLORS = {
    "Critical": "#FF6A00",
    "Warning": "#D89F7B",
}

# Canned conditions served when no live observation is available
FALLBACK_CONDITIONS = {
    "temperature": 32.0,
    "humidity": 75.0,
    "wind_speed": 15.0,
    "pressure": 1013.0,
    "cloud_cover": 60.0,
    "precipitation_intensity": 20.0,
    "storm_activity": 30.0,
}

# WMO weather interpretation codes for thunderstorms
THUNDERSTORM_CODES = {95, 96, 99}
