"""Cities labelled on the default map of the report (Central-West and South Brazil)."""

from nomads_forecast.types.geo import LatLon

CITIES = [
    LatLon(lat=-21.7150, lon=-52.4219, label="Bataguassu"),
    LatLon(lat=-19.7270, lon=-51.9281, label="Inocência"),
    LatLon(lat=-22.2231, lon=-54.8118, label="Dourados"),
    LatLon(lat=-24.2081, lon=-50.9494, label="Ortigueira"),
    LatLon(lat=-24.9555, lon=-53.4552, label="Cascavel"),
    LatLon(lat=-18.9186, lon=-48.2772, label="Uberlândia"),
    LatLon(lat=-22.3145, lon=-49.0587, label="Bauru"),
    LatLon(lat=-21.1775, lon=-47.8103, label="Ribeirão Preto"),
    LatLon(lat=-17.7923, lon=-50.9192, label="Rio Verde"),
    LatLon(lat=-17.3153, lon=-53.2153, label="Alto Araguaia"),
    LatLon(lat=-28.2628, lon=-52.4067, label="Passo Fundo"),
]

STATE_CAPITALS = [
    LatLon(lat=-20.4697, lon=-54.6201, label="Campo Grande"),
    LatLon(lat=-15.6014, lon=-56.0979, label="Cuiabá"),
    LatLon(lat=-16.6869, lon=-49.2648, label="Goiânia"),
    LatLon(lat=-15.7939, lon=-47.8828, label="Brasília"),
    LatLon(lat=-19.9167, lon=-43.9345, label="Belo Horizonte"),
    LatLon(lat=-23.5505, lon=-46.6333, label="São Paulo"),
    LatLon(lat=-22.9068, lon=-43.1729, label="Rio de Janeiro"),
    LatLon(lat=-20.3155, lon=-40.3128, label="Vitória"),
    LatLon(lat=-25.4284, lon=-49.2733, label="Curitiba"),
    LatLon(lat=-27.5954, lon=-48.5480, label="Florianópolis"),
    LatLon(lat=-30.0346, lon=-51.2177, label="Porto Alegre"),
]

DEFAULT_PLACES = CITIES + STATE_CAPITALS
