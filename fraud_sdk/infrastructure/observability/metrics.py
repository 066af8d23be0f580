"""Prometheus metrics for payload mapping and case validation"""

from prometheus_client import Counter

# Mapping metrics
models_built_counter = Counter(
    "fraud_sdk_models_built_total",
    "Models built from a decoded payload",
    ["model"],
)

unknown_fields_counter = Counter(
    "fraud_sdk_unknown_fields_total",
    "Payload keys dropped because the model does not declare them",
    ["model"],
)

# Validation metrics
validation_failures_counter = Counter(
    "fraud_sdk_validation_failures_total",
    "Case validations that returned non-true results",
    ["model"],
)


def record_model_built(model: str, dropped_fields: int = 0) -> None:
    """Record one payload mapping and the number of keys it dropped"""
    models_built_counter.labels(model=model).inc()
    if dropped_fields:
        unknown_fields_counter.labels(model=model).inc(dropped_fields)


def record_validation_failure(model: str) -> None:
    validation_failures_counter.labels(model=model).inc()
