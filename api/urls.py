"""
url construction for the open-meteo product lines

everything here is a pure function of its arguments, the client passes in
the current time so the archive cut-over can be tested without a clock
"""

from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Iterable, Optional, Union
from urllib.parse import urlencode

from models import MetricName, Options, metric_name

DEFAULT_HOST = "api.open-meteo.com"
DEFAULT_SCHEME = "https"
CUSTOMER_PREFIX = "customer-"

# the forecast api only serves roughly three months of history
FORECAST_HISTORY_LIMIT = timedelta(days=90)

DATE_FORMAT = "%Y-%m-%d"


class Product(Enum):
    """open-meteo product lines as (host prefix, path)"""
    FORECAST = ("", "/v1/forecast")
    ARCHIVE = ("archive-", "/v1/archive")
    SEASONAL = ("seasonal-", "/v1/seasonal")
    MARINE = ("marine-", "/v1/marine")

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def path(self) -> str:
        return self.value[1]


def encode_metrics(metrics: Optional[Iterable[MetricName]]) -> str:
    """join metric names with commas, keeping order and duplicates"""
    if not metrics:
        return ""
    return ",".join(metric_name(m) for m in metrics)


def _as_utc_datetime(value: Union[datetime, date]) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return datetime.combine(value, time.min, tzinfo=timezone.utc)


def is_historical(start: Optional[Union[datetime, date]], now: datetime) -> bool:
    """
    true when start is further back than the forecast api can serve

    dates without a time count from midnight utc, naive datetimes are taken as utc
    """
    if start is None:
        return False
    return _as_utc_datetime(now) - _as_utc_datetime(start) > FORECAST_HISTORY_LIMIT


def resolve_product(options: Options) -> Product:
    """
    pick the product line requested by the options

    marine and seasonal are only selected explicitly (flags or a model list),
    never from the metrics
    """
    if options.marine:
        return Product.MARINE
    if options.seasonal or options.models:
        return Product.SEASONAL
    return Product.FORECAST


def select_endpoint(
    product: Product,
    start: Optional[Union[datetime, date]],
    now: datetime,
    has_api_key: bool,
    base_host: str = DEFAULT_HOST,
) -> tuple[str, str]:
    """
    return the (host, path) pair a request should go to

    args:
        product: product line resolved from the options
        start: requested start date, if any
        now: time of the call
        has_api_key: whether a commercial key is configured
        base_host: forecast host the product prefixes are applied to

    returns:
        tuple of (host, path)
    """
    if product is Product.FORECAST and is_historical(start, now):
        product = Product.ARCHIVE

    host = product.prefix + base_host
    if has_api_key:
        host = CUSTOMER_PREFIX + host
    return host, product.path


def _format_date(value: Union[datetime, date]) -> str:
    return value.strftime(DATE_FORMAT)


def query_params(options: Options, api_key: Optional[str] = None) -> dict[str, str]:
    """map options to query parameters, leaving out anything unset or zero"""
    params = {
        "latitude": str(options.latitude),
        "longitude": str(options.longitude),
    }

    if api_key:
        params["apikey"] = api_key

    if options.temperature_unit is not None:
        params["temperature_unit"] = options.temperature_unit.value
    if options.windspeed_unit is not None:
        params["windspeed_unit"] = options.windspeed_unit.value
    if options.precipitation_unit is not None:
        params["precipitation_unit"] = options.precipitation_unit.value

    if options.timezone:
        params["timezone"] = options.timezone

    if options.past_days > 0:
        params["past_days"] = str(options.past_days)
    if options.forecast_days > 0:
        params["forecast_days"] = str(options.forecast_days)

    if options.start is not None:
        params["start_date"] = _format_date(options.start)
    if options.end is not None:
        params["end_date"] = _format_date(options.end)

    if options.models:
        params["models"] = ",".join(options.models)

    for key, metrics in (
        ("hourly", options.hourly_metrics),
        ("daily", options.daily_metrics),
        ("weekly", options.weekly_metrics),
        ("monthly", options.monthly_metrics),
        ("current", options.current_metrics),
    ):
        value = encode_metrics(metrics)
        if value:
            params[key] = value

    return params


def encode_query(params: dict[str, str]) -> str:
    """form-encode parameters sorted by key"""
    return urlencode(sorted(params.items()))


def build_url(
    options: Options,
    now: datetime,
    api_key: Optional[str] = None,
    scheme: str = DEFAULT_SCHEME,
    base_host: str = DEFAULT_HOST,
) -> str:
    """
    build the full request url for the given options

    args:
        options: request options
        now: time of the call, used for the archive cut-over
        api_key: commercial api key, if any
        scheme: url scheme
        base_host: forecast host the product prefixes are applied to

    returns:
        absolute url including the query string
    """
    host, path = select_endpoint(
        resolve_product(options),
        options.start,
        now,
        has_api_key=bool(api_key),
        base_host=base_host,
    )
    query = encode_query(query_params(options, api_key))
    return f"{scheme}://{host}{path}?{query}"


__all__ = [
    "CUSTOMER_PREFIX",
    "DEFAULT_HOST",
    "DEFAULT_SCHEME",
    "FORECAST_HISTORY_LIMIT",
    "Product",
    "build_url",
    "encode_metrics",
    "encode_query",
    "is_historical",
    "query_params",
    "resolve_product",
    "select_endpoint",
]
