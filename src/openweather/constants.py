from __future__ import annotations
# API base
API_BASE = "https://api.openweathermap.org/data/2.5/"

# Endpoint paths relative to API_BASE
ENDPOINT_PATHS = {
    "current": "weather",
    "forecast_5_day": "forecast",
    "forecast_16_day": "forecast/daily",
    "one_call": "onecall",
    "one_call_historical": "onecall/timemachine",
    "history_city": "history/city",
    "accumulated_temperature": "history/accumulated_temperature",
    "accumulated_precipitation": "history/accumulated_precipitation",
    "uvi": "uvi",
    "uvi_forecast": "uvi/forecast",
    "uvi_history": "uvi/history",
}

# Query parameter carrying the API key
API_KEY_PARAM = "APPID"

# Day-count limits
DAILY_FORECAST_MAX_DAYS = 16
UV_FORECAST_MAX_DAYS = 8

ONE_CALL_EXCLUDE = "minutely,hourly"
HISTORY_TYPE = "hour"

__all__ = [
    "API_BASE",
    "ENDPOINT_PATHS",
    "API_KEY_PARAM",
    "DAILY_FORECAST_MAX_DAYS",
    "UV_FORECAST_MAX_DAYS",
    "ONE_CALL_EXCLUDE",
    "HISTORY_TYPE",
]
