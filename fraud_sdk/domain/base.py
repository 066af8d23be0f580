"""Pydantic base for models mapped from decoded JSON payloads"""

import logging
from dataclasses import dataclass
from inspect import isclass
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type, TypeVar, Union, get_args, get_origin

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)

from fraud_sdk.config import settings
from fraud_sdk.domain.exceptions import InvalidPayloadError, UnknownFieldError
from fraud_sdk.infrastructure.observability.metrics import record_model_built

logger = logging.getLogger(__name__)

M = TypeVar("M", bound="Model")

ValidationResult = Union[bool, List[Any]]

# Validation context marking models built from a wire payload
PAYLOAD_CONTEXT = {"from_payload": True}


@dataclass(frozen=True)
class FieldSpec:
    """One declared field: attribute name, wire alias and nested model type"""

    attr: str
    wire: str
    model: Optional[Type["Model"]] = None
    many: bool = False

    @property
    def is_scalar(self) -> bool:
        return self.model is None


def default_currency() -> str:
    return settings.default_currency


def _nested_model(annotation: Any) -> Tuple[Optional[Type["Model"]], bool]:
    """Resolve `Optional[Model]` / `List[Model]` annotations to (model, many)"""
    origin = get_origin(annotation)
    many = origin in (list, List)
    candidates = get_args(annotation) if origin is not None else (annotation,)
    for candidate in candidates:
        if isclass(candidate) and issubclass(candidate, Model):
            return candidate, many
    return None, False


_FIELD_TABLES: Dict[type, Dict[str, FieldSpec]] = {}


class Model(BaseModel):
    """
    Base for payload-mapped models.

    Fields are declared with a camelCase alias. Scalars are typed `Any` so
    raw payload values are kept as-is; nested models are built from
    non-empty sub-maps and list items. Unknown keys are ignored.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @classmethod
    def field_table(cls) -> Dict[str, FieldSpec]:
        table = _FIELD_TABLES.get(cls)
        if table is None:
            table = {}
            for name, info in cls.model_fields.items():
                model, many = _nested_model(info.annotation)
                wire = info.alias or name
                table[wire] = FieldSpec(attr=name, wire=wire, model=model, many=many)
            _FIELD_TABLES[cls] = table
        return table

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        """Declared wire names in declaration order"""
        return tuple(cls.field_table())

    @classmethod
    def _spec(cls, wire_name: str) -> FieldSpec:
        try:
            return cls.field_table()[wire_name]
        except KeyError:
            raise UnknownFieldError(cls.__name__, wire_name) from None

    @model_validator(mode="before")
    @classmethod
    def record_payload(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or not (info.context or {}).get("from_payload"):
            return data

        table = cls.field_table()
        known = set(table) | {spec.attr for spec in table.values()}
        dropped = [key for key in data if key not in known]
        for key in dropped:
            logger.debug("Dropping unknown field", extra={"model": cls.__name__, "field_name": key})
        record_model_built(cls.__name__, len(dropped))
        return data

    @field_validator("*", mode="before")
    @classmethod
    def normalize_nested(cls, value: Any, info: ValidationInfo) -> Any:
        spec = cls.field_table().get(cls.model_fields[info.field_name].alias or info.field_name)
        if spec is None or spec.is_scalar:
            return value

        if spec.many:
            if not isinstance(value, (list, tuple)):
                return []
            return [_nested_item(item) for item in value]

        if isinstance(value, Model):
            return value
        if value and isinstance(value, Mapping):
            return dict(value)
        return None

    @model_serializer(mode="wrap")
    def omit_empty_collections(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for spec in self.field_table().values():
            if not spec.many:
                continue
            for key in (spec.wire, spec.attr):
                if key in data and not data[key]:
                    del data[key]
        return data

    @classmethod
    def from_payload(cls: Type[M], payload: Any) -> M:
        """
        Build a model from a decoded payload.

        Anything other than a non-empty mapping yields a default instance.
        """
        if not payload or not isinstance(payload, Mapping):
            payload = {}
        return cls.model_validate(dict(payload), context=PAYLOAD_CONTEXT)

    @classmethod
    def from_json(cls: Type[M], document: Union[str, bytes]) -> M:
        """
        Decode a JSON document and build a model from it.

        Raises:
            InvalidPayloadError: Document is not valid JSON or not an object
        """
        try:
            return cls.model_validate_json(document, context=PAYLOAD_CONTEXT)
        except ValidationError as e:
            raise InvalidPayloadError(f"Invalid JSON document for {cls.__name__}: {e}") from e

    def get(self, wire_name: str) -> Any:
        """Return the value of a field addressed by its wire name"""
        return getattr(self, self._spec(wire_name).attr)

    def set(self, wire_name: str, value: Any) -> None:
        """Assign a field addressed by its wire name"""
        setattr(self, self._spec(wire_name).attr, value)

    def to_payload(self) -> Dict[str, Any]:
        """Wire representation; None values and empty collections are omitted"""
        return self.model_dump(by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(
            by_alias=True,
            exclude_none=True,
            indent=indent if indent is not None else settings.json_indent,
        )

    def validate(self) -> ValidationResult:
        """Return True when valid, otherwise a list of failures"""
        # TODO: enforce field format rules once the API publishes them
        return True


def _nested_item(item: Any) -> Any:
    if isinstance(item, Model):
        return item
    if isinstance(item, Mapping):
        return dict(item)
    return {}
