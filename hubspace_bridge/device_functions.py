# Maps logical device functions to Afero attribute ids.
# Attribute numbering is per device type, so ids repeat across functions.
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Tuple

from .errors import FunctionNotConfiguredError


class DeviceFunction(Enum):
    LIGHT_POWER = "light-power"
    BRIGHTNESS = "brightness"
    FAN_POWER = "fan-power"
    FAN_SPEED = "fan-speed"
    LIGHT_TEMPERATURE = "light-temperature"
    LIGHT_COLOR = "light-color"
    COLOR_MODE = "color-mode"


# Function Classes
class FunctionClass:
    POWER = "power"
    BRIGHTNESS = "brightness"
    FAN_SPEED = "fan-speed"
    COLOR_TEMPERATURE = "color-temperature"
    COLOR_RGB = "color-rgb"
    COLOR_MODE = "color-mode"


# Function Instances
class FunctionInstance:
    LIGHT_POWER = "light-power"
    FAN_POWER = "fan-power"
    FAN_SPEED = "fan-speed"


@dataclass(frozen=True)
class DeviceFunctionDef:
    type: DeviceFunction
    attribute_id: int
    function_class: str
    function_instance_name: Optional[str] = None

    @property
    def label(self) -> str:
        return self.function_instance_name or self.function_class


DEVICE_FUNCTIONS: Final[Tuple[DeviceFunctionDef, ...]] = (
    # TODO: fan light power (attribute 2) and fan light brightness (attribute 4)
    # clash with the bulb definitions below; add them once functions are keyed by device type.
    DeviceFunctionDef(DeviceFunction.FAN_POWER, 3, FunctionClass.POWER, FunctionInstance.FAN_POWER),
    DeviceFunctionDef(DeviceFunction.FAN_SPEED, 6, FunctionClass.FAN_SPEED, FunctionInstance.FAN_SPEED),
    DeviceFunctionDef(DeviceFunction.LIGHT_POWER, 1, FunctionClass.POWER),
    DeviceFunctionDef(DeviceFunction.BRIGHTNESS, 2, FunctionClass.BRIGHTNESS),
    DeviceFunctionDef(DeviceFunction.LIGHT_TEMPERATURE, 3, FunctionClass.COLOR_TEMPERATURE),
    DeviceFunctionDef(DeviceFunction.LIGHT_COLOR, 4, FunctionClass.COLOR_RGB),
    # Switches between temperature (0) and color (1) light modes. Reading the
    # current color only yields a value while the mode is color.
    DeviceFunctionDef(DeviceFunction.COLOR_MODE, 5, FunctionClass.COLOR_MODE),
)


def get_device_function_def(function: DeviceFunction) -> DeviceFunctionDef:
    """Return the definition for ``function``.

    Raises FunctionNotConfiguredError when the table has no entry; every
    function used by the bridge must be defined here.
    """
    for definition in DEVICE_FUNCTIONS:
        if definition.type == function:
            return definition
    raise FunctionNotConfiguredError(function)
