from tortoise import ConfigurationError
from tortoise.fields import BinaryField


class FixedBinaryField(BinaryField):
    """
    A binary column of a fixed width.

    Values shorter than the width are right padded with null bytes,
    values longer than the width are rejected.
    """

    def __init__(self, length: int, *args, **kwargs):
        super().__init__(*args, **kwargs)
        if length < 1:
            raise ConfigurationError(f"{length} is not a valid binary length!")
        self.length = length

    def to_db_value(self, value, instance):
        if value is not None:
            value = bytes(value)
            if len(value) > self.length:
                raise ValueError(f"Binary value of {len(value)} bytes does not fit in {self.length}.")
            value = value.ljust(self.length, b"\x00")
        return super().to_db_value(value, instance)
