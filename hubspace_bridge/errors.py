"""Errors raised by the device function catalog and the device service."""


class HubspaceBridgeError(Exception):
    pass


class FunctionNotConfiguredError(HubspaceBridgeError):
    """A device function has no catalog definition.

    This is a development-time omission, callers should let it propagate.
    """

    def __init__(self, function):
        self.function = function
        super().__init__(
            f"Failed to get function definition for '{getattr(function, 'name', function)}'. "
            "Each function requires to set a definition."
        )


class UnsupportedValueTypeError(HubspaceBridgeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"The value type is not supported: {type(value).__name__} ({value!r})")


class LockTimeoutError(HubspaceBridgeError):
    def __init__(self, timeout: float):
        self.timeout = timeout
        super().__init__(f"Timed out after {timeout:g}s waiting for the account server lock")
