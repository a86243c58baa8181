from .exceptions import ValidationError


ABSOLUTE_ZERO_CELSIUS = -273.15


class Temperature:
    """Temperature stored in degrees Celsius."""

    def __init__(self):
        self._celsius = 0.0

    @property
    def celsius(self) -> float:
        return self._celsius

    def set_celsius(self, value: float) -> None:
        """Set the temperature in Celsius."""
        if value < ABSOLUTE_ZERO_CELSIUS:
            raise ValidationError(f"Temperature cannot be below {ABSOLUTE_ZERO_CELSIUS} °C",
                                  error_code="below_absolute_zero",
                                  details={'field': 'celsius', 'value': value})
        self._celsius = float(value)

    def get_celsius(self) -> float:
        return self._celsius

    def get_fahrenheit(self) -> float:
        return self._celsius * 9 / 5 + 32
