"""Temperature display: stored Celsius values shown in Celsius, Fahrenheit or Kelvin."""

from __future__ import annotations

from enum import IntEnum


class TemperatureUnit(IntEnum):
    CELSIUS = 0
    FAHRENHEIT = 1
    KELVIN = 2


UNIT_LABELS = {
    TemperatureUnit.CELSIUS: "Celsius",
    TemperatureUnit.FAHRENHEIT: "Fahrenheit",
    TemperatureUnit.KELVIN: "Kelvin",
}


def convert_temperature(unit: int, celsius: float) -> str:
    """
    Format a Celsius value in the selected unit (0 °C, 1 °F, 2 K). Fahrenheit and Kelvin are
    rounded to two decimals; Celsius, and any unknown selector, shows the stored value as is.
    """
    if unit == TemperatureUnit.FAHRENHEIT:
        return f"{round(celsius * 9 / 5 + 32, 2)} °F"
    if unit == TemperatureUnit.KELVIN:
        return f"{round(celsius + 273.15, 2)} K"
    return f"{float(celsius)} °C"


def format_mass(mass: float) -> str:
    """Atomic mass as shown on the detail page: first five characters of the number."""
    return str(mass)[:5]
