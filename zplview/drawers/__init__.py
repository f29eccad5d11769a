"""Canvas drawing for interpreted barcode fields."""

from .barcode_drawer import BarcodeFieldDrawer
from .label_canvas import LabelCanvas

__all__ = ["BarcodeFieldDrawer", "LabelCanvas"]
