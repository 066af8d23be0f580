"""SDK-specific exceptions"""


class SDKException(Exception):
    """Base exception for the SDK"""

    pass


class InvalidPayloadError(SDKException):
    """Payload could not be decoded into a JSON object"""

    pass


class UnknownFieldError(SDKException, KeyError):
    """Wire name is not declared on the model"""

    def __init__(self, model: str, field_name: str):
        self.model = model
        self.field_name = field_name
        super().__init__(f"{model} has no field `{field_name}`")

    def __str__(self) -> str:
        return self.args[0]
