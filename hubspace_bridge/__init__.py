from .device_functions import DeviceFunction, DeviceFunctionDef, get_device_function_def
from .device_service import DeviceService
from .errors import FunctionNotConfiguredError, LockTimeoutError, UnsupportedValueTypeError

__all__ = [
    "DeviceFunction",
    "DeviceFunctionDef",
    "DeviceService",
    "FunctionNotConfiguredError",
    "LockTimeoutError",
    "UnsupportedValueTypeError",
    "get_device_function_def",
]
