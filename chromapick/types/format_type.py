from enum import Enum
class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"

max_channel = {
    FormatType.INT: 255,
    FormatType.FLOAT: 1.0,
}

format_classes = {
    FormatType.INT: int,
    FormatType.FLOAT: float,
}
