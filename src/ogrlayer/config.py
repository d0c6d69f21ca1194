# src/ogrlayer/config.py
from dataclasses import dataclass


@dataclass
class LayerConfig:
    """
    Configuration for a Layer wrapper.

    Attributes:
        approx_ok: Let the driver adjust a field definition (width, type) it
            cannot create exactly when registering fields
        strict_fields: Raise FieldError for field names missing from the
            schema when writing values; when False they are logged and skipped
        reset_on_iterate: Reset the layer read cursor each time features()
            starts a pass
    """

    approx_ok: bool = True
    strict_fields: bool = True
    reset_on_iterate: bool = True
